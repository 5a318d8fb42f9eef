from services.passenger.domain.value_object import PassengerId
from services.payment.domain.entity import PaymentInfo
from services.payment.domain.repository import PaymentRepository
from services.payment.domain.value_object import PaymentId
from services.shared.domain.exception import ResourceNotFoundException


class GetPaymentService:
    """決済情報取得サービス"""

    def __init__(self, repository: PaymentRepository) -> None:
        self._repository = repository

    def get(self, payment_id: PaymentId) -> PaymentInfo:
        """決済を取得する。存在しない場合は ResourceNotFoundException"""
        payment = self._repository.find_by_id(payment_id)
        if payment is None:
            raise ResourceNotFoundException(f"Payment not found: {payment_id}")
        return payment

    def list_for_passenger(self, passenger_id: PassengerId) -> list[PaymentInfo]:
        """乗客に紐づく決済を取得する"""
        return self._repository.find_by_passenger_id(passenger_id)
