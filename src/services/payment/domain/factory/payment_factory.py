from services.passenger.domain.entity import PassengerInfo
from services.payment.domain.entity import PaymentInfo
from services.payment.domain.value_object import AccountNumber
from services.shared.domain.exception import BusinessRuleViolationException


class PaymentFactory:
    """決済ファクトリ

    - 決済額は常に乗客の運賃から導出する（リクエストから独立に受け取らない）
    - 乗客IDは保存済みの乗客からコピーする
    """

    def create(
        self, account_number: AccountNumber, passenger: PassengerInfo
    ) -> PaymentInfo:
        """保存済みの乗客に紐づく未保存の決済エンティティを生成する"""
        if not passenger.is_persisted:
            raise BusinessRuleViolationException(
                "Cannot create a payment for an unsaved passenger"
            )

        return PaymentInfo(
            account_number=account_number,
            amount=passenger.fare,
            passenger_id=passenger.id,
        )
