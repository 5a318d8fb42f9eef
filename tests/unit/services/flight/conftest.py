from decimal import Decimal

import pytest

from services.flight.applications.book_flight import BookFlightService
from services.flight.domain.value_object import BookingRequest
from services.payment.domain.factory import PaymentFactory
from services.payment.domain.value_object import AccountNumber


@pytest.fixture
def book_flight_service(passenger_repository, payment_repository, credit_validator):
    return BookFlightService(
        passenger_repository=passenger_repository,
        payment_repository=payment_repository,
        credit_validator=credit_validator,
        payment_factory=PaymentFactory(),
    )


@pytest.fixture
def create_booking_request(create_passenger):
    """BookingRequest を生成する Factory fixture"""

    def _factory(
        account_number: str = "acc3", fare: Decimal = Decimal("4000.0")
    ) -> BookingRequest:
        return BookingRequest(
            passenger=create_passenger(fare=fare),
            account_number=AccountNumber(account_number),
        )

    return _factory
