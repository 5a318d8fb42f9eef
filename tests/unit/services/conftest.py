import itertools
import os
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

# handler モジュールの import 時に boto3 リソースを生成するため、先に設定しておく
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "test-flight-booking-table")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "flight-booking-service")

from services.passenger.domain.entity import PassengerInfo  # noqa: E402
from services.passenger.domain.value_object import (  # noqa: E402
    PassengerId,
    PassengerName,
    TravelDate,
)
from services.payment.domain.service import CreditValidator  # noqa: E402
from services.payment.domain.value_object import (  # noqa: E402
    CreditLimitTable,
    PaymentId,
)
from services.shared.domain import Money  # noqa: E402


@pytest.fixture
def create_passenger():
    """PassengerInfo を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        passenger_id: int | None = None,
        name: str = "Taro Yamada",
        email: str = "taro@example.com",
        source: str = "Tokyo",
        destination: str = "Osaka",
        travel_date: str = "2024-01-01",
        pickup_time: str = "10:00",
        arrival_time: str = "12:00",
        fare: Decimal = Decimal("4000"),
    ) -> PassengerInfo:
        return PassengerInfo(
            id=PassengerId(passenger_id) if passenger_id is not None else None,
            name=PassengerName(name),
            email=email,
            source=source,
            destination=destination,
            travel_date=TravelDate.from_string(travel_date),
            pickup_time=pickup_time,
            arrival_time=arrival_time,
            fare=Money(amount=fare),
        )

    return _factory


@pytest.fixture
def passenger_repository():
    """create で連番の ID を採番する乗客リポジトリのモック"""
    repository = MagicMock()
    sequence = itertools.count(1)

    def _create(passenger):
        return passenger.with_id(PassengerId(next(sequence)))

    repository.create.side_effect = _create
    return repository


@pytest.fixture
def payment_repository():
    """create で連番の ID を採番する決済リポジトリのモック"""
    repository = MagicMock()
    sequence = itertools.count(1)

    def _create(payment):
        return payment.with_id(PaymentId(next(sequence)))

    repository.create.side_effect = _create
    return repository


@pytest.fixture
def credit_validator():
    """既定の与信枠（acc1〜acc4）を持つ CreditValidator"""
    return CreditValidator(CreditLimitTable.default())
