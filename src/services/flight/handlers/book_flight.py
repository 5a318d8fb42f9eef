from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from services.flight.applications.book_flight import BookFlightService
from services.flight.domain.value_object import BookingRequest
from services.flight.handlers.request_models import BookFlightRequest
from services.flight.handlers.response_models import error_response, to_response
from services.passenger.domain.factory import PassengerDetails, PassengerFactory
from services.passenger.infrastructure.dynamodb_passenger_repository import (
    DynamoDBPassengerRepository,
)
from services.payment.domain.exception import (
    InsufficientFundsException,
    UnknownAccountException,
)
from services.payment.domain.factory import PaymentFactory
from services.payment.domain.service import CreditValidator
from services.payment.domain.value_object import AccountNumber
from services.payment.infrastructure.credit_limit_config import (
    load_credit_limit_table,
)
from services.payment.infrastructure.dynamodb_payment_repository import (
    DynamoDBPaymentRepository,
)
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    StoreFailureException,
)

logger = Logger()

# =============================================================================
# 依存関係の組み立て（Composition Root）
# =============================================================================
passenger_factory = PassengerFactory()
service = BookFlightService(
    passenger_repository=DynamoDBPassengerRepository(),
    payment_repository=DynamoDBPaymentRepository(),
    credit_validator=CreditValidator(load_credit_limit_table()),
    payment_factory=PaymentFactory(),
)

# 先頭から順に isinstance で判定する（サブクラスを先に置く）
_ERROR_CODES: list[tuple[type[DomainException], str]] = [
    (InsufficientFundsException, "INSUFFICIENT_FUNDS"),
    (UnknownAccountException, "UNKNOWN_ACCOUNT"),
    (DuplicateResourceException, "STORE_FAILURE"),
    (StoreFailureException, "STORE_FAILURE"),
    (BusinessRuleViolationException, "BUSINESS_RULE_VIOLATION"),
]


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """航空券予約 Lambda Handler

    Payload キーがあればその中身をビジネスデータとして扱う。
    入力エラーとドメインエラーはエラーコード付きのレスポンスに変換し、
    それ以外の例外はそのまま送出する。
    """
    logger.info("Received book flight request")

    payload = event.get("Payload", event)
    try:
        request = BookFlightRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning("Invalid book flight request", extra={"errors": e.error_count()})
        return error_response(
            "VALIDATION_ERROR",
            "Invalid book flight request",
            details=e.errors(include_url=False, include_context=False),
        )

    try:
        booking_request = _to_booking_request(request)
    except ValueError as e:
        logger.warning("Invalid book flight request", extra={"reason": str(e)})
        return error_response("VALIDATION_ERROR", str(e))

    try:
        acknowledgement = service.book_flight(booking_request)
    except DomainException as e:
        error_code = _error_code_for(e)
        if error_code == "STORE_FAILURE":
            logger.exception("Failed to book flight")
        else:
            logger.info("Booking rejected", extra={"error_code": error_code})
        return error_response(error_code, str(e))

    logger.info(
        "Flight booked",
        extra={
            "passenger_id": str(acknowledgement.passenger.id),
            "reference_code": str(acknowledgement.reference_code),
        },
    )
    return to_response(acknowledgement)


def _to_booking_request(request: BookFlightRequest) -> BookingRequest:
    """リクエストボディから BookingRequest を構築する"""
    passenger_info = request.passenger_info
    passenger_details: PassengerDetails = {
        "name": passenger_info.name,
        "email": passenger_info.email,
        "source": passenger_info.source,
        "destination": passenger_info.destination,
        "travel_date": passenger_info.travel_date,
        "pickup_time": passenger_info.pickup_time,
        "arrival_time": passenger_info.arrival_time,
        "fare": passenger_info.fare,
    }
    return BookingRequest(
        passenger=passenger_factory.create(passenger_details),
        account_number=AccountNumber(request.payment_info.account_number),
    )


def _error_code_for(error: DomainException) -> str:
    for exception_type, error_code in _ERROR_CODES:
        if isinstance(error, exception_type):
            return error_code
    raise error
