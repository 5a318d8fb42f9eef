from decimal import Decimal

import pytest

from services.flight.domain.enum import AcknowledgementStatus
from services.flight.domain.value_object import BookingAcknowledgement
from services.payment.domain.exception import (
    InsufficientFundsException,
    UnknownAccountException,
)
from services.shared.domain import Money
from services.shared.domain.exception import StoreFailureException


class TestBookFlightService:
    """BookFlightService のテスト"""

    def test_book_flight_within_limit_succeeds(
        self, book_flight_service, create_booking_request, passenger_repository
    ):
        """与信枠内の運賃なら success の受付結果が返る"""
        request = create_booking_request(account_number="acc3", fare=Decimal("4000.0"))

        acknowledgement = book_flight_service.book_flight(request)

        assert isinstance(acknowledgement, BookingAcknowledgement)
        assert acknowledgement.status == AcknowledgementStatus.SUCCESS
        assert acknowledgement.status.value == "success"
        assert acknowledgement.total_fare == Money.of("4000.0")
        assert len(str(acknowledgement.reference_code)) == 8
        assert acknowledgement.passenger.id is not None
        passenger_repository.create.assert_called_once_with(request.passenger)

    def test_payment_is_linked_to_saved_passenger(
        self, book_flight_service, create_booking_request, payment_repository
    ):
        """決済の乗客ID・金額は保存済み乗客の ID・運賃と一致する"""
        request = create_booking_request(account_number="acc1", fare=Decimal("11999.99"))

        acknowledgement = book_flight_service.book_flight(request)

        payment_repository.create.assert_called_once()
        payment = payment_repository.create.call_args[0][0]
        assert payment.passenger_id == acknowledgement.passenger.id
        assert payment.amount == acknowledgement.passenger.fare
        assert str(payment.account_number) == "acc1"

    def test_fare_equal_to_limit_succeeds(
        self, book_flight_service, create_booking_request
    ):
        request = create_booking_request(account_number="acc3", fare=Decimal("5000.0"))

        acknowledgement = book_flight_service.book_flight(request)

        assert acknowledgement.total_fare == Money.of("5000.0")

    def test_fare_over_limit_raises_insufficient_funds(
        self,
        book_flight_service,
        create_booking_request,
        passenger_repository,
        payment_repository,
    ):
        """与信枠超過なら決済は作成されず、保存済みの乗客は残る"""
        request = create_booking_request(account_number="acc3", fare=Decimal("6000.0"))

        with pytest.raises(InsufficientFundsException):
            book_flight_service.book_flight(request)

        passenger_repository.create.assert_called_once()
        payment_repository.create.assert_not_called()

    @pytest.mark.parametrize("fare", [Decimal("0"), Decimal("1000"), Decimal("99999")])
    def test_unknown_account_raises_error_regardless_of_fare(
        self, book_flight_service, create_booking_request, payment_repository, fare
    ):
        request = create_booking_request(account_number="acc9", fare=fare)

        with pytest.raises(UnknownAccountException):
            book_flight_service.book_flight(request)

        payment_repository.create.assert_not_called()

    def test_same_request_twice_creates_two_bookings(
        self, book_flight_service, create_booking_request, payment_repository
    ):
        """重複排除はせず、同一入力でも別の乗客・参照コードになる"""
        request = create_booking_request()

        first = book_flight_service.book_flight(request)
        second = book_flight_service.book_flight(request)

        assert first.passenger.id != second.passenger.id
        assert first.reference_code != second.reference_code
        assert payment_repository.create.call_count == 2

    def test_passenger_store_failure_aborts_booking(
        self,
        book_flight_service,
        create_booking_request,
        passenger_repository,
        payment_repository,
    ):
        passenger_repository.create.side_effect = StoreFailureException("down")

        with pytest.raises(StoreFailureException):
            book_flight_service.book_flight(create_booking_request())

        payment_repository.create.assert_not_called()

    def test_payment_store_failure_propagates(
        self, book_flight_service, create_booking_request, payment_repository
    ):
        payment_repository.create.side_effect = StoreFailureException("down")

        with pytest.raises(StoreFailureException, match="down"):
            book_flight_service.book_flight(create_booking_request())
