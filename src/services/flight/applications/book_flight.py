from aws_lambda_powertools import Logger

from services.flight.domain.enum import AcknowledgementStatus
from services.flight.domain.value_object import (
    BookingAcknowledgement,
    BookingRequest,
    ReferenceCode,
)
from services.passenger.domain.repository import PassengerRepository
from services.payment.domain.exception import (
    InsufficientFundsException,
    UnknownAccountException,
)
from services.payment.domain.factory import PaymentFactory
from services.payment.domain.repository import PaymentRepository
from services.payment.domain.service import CreditValidator

logger = Logger(child=True)


class BookFlightService:
    """航空券予約ユースケース

    乗客の保存 → 与信枠チェック → 決済の保存 → 受付結果の生成 を順に行う。
    いずれかのステップが失敗した時点で処理を中断し、例外をそのまま送出する。
    2つの書き込みをまたぐトランザクションはなく、与信チェックで失敗しても
    保存済みの乗客は残る。
    """

    def __init__(
        self,
        passenger_repository: PassengerRepository,
        payment_repository: PaymentRepository,
        credit_validator: CreditValidator,
        payment_factory: PaymentFactory,
    ) -> None:
        self._passenger_repository = passenger_repository
        self._payment_repository = payment_repository
        self._credit_validator = credit_validator
        self._payment_factory = payment_factory

    def book_flight(self, request: BookingRequest) -> BookingAcknowledgement:
        """航空券を予約する

        Returns:
            BookingAcknowledgement: 受付結果（Handler層でレスポンス形式に変換する）

        Raises:
            InsufficientFundsException: 運賃が与信枠を超えている
            UnknownAccountException: 口座が与信枠テーブルに存在しない
            StoreFailureException: 永続化に失敗した
        """
        # 1. 乗客を保存し、採番された ID を受け取る
        passenger = self._passenger_repository.create(request.passenger)

        # 2. 運賃で与信枠をチェック
        try:
            self._credit_validator.validate(request.account_number, passenger.fare)
        except (InsufficientFundsException, UnknownAccountException):
            logger.warning(
                "Credit check failed after passenger was saved",
                extra={
                    "passenger_id": str(passenger.id),
                    "account_number": str(request.account_number),
                },
            )
            raise

        # 3. 乗客ID・運賃を引き継いだ決済を保存
        payment = self._payment_factory.create(request.account_number, passenger)
        self._payment_repository.create(payment)

        # 4. 受付結果を返却
        return BookingAcknowledgement(
            status=AcknowledgementStatus.SUCCESS,
            total_fare=passenger.fare,
            reference_code=ReferenceCode.generate(),
            passenger=passenger,
        )
