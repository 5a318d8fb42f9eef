from decimal import Decimal

import pytest

from services.passenger.domain.value_object import PassengerId
from services.payment.domain.entity import PaymentInfo
from services.payment.domain.value_object import AccountNumber, PaymentId
from services.shared.domain import Money


@pytest.fixture
def create_payment():
    """PaymentInfo を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        payment_id: int | None = None,
        account_number: str = "acc1",
        amount: Decimal = Decimal("4000"),
        passenger_id: int = 1,
    ) -> PaymentInfo:
        return PaymentInfo(
            id=PaymentId(payment_id) if payment_id is not None else None,
            account_number=AccountNumber(account_number),
            amount=Money(amount=amount),
            passenger_id=PassengerId(passenger_id),
        )

    return _factory
