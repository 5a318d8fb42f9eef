from abc import abstractmethod

from services.passenger.domain.value_object import PassengerId
from services.payment.domain.entity import PaymentInfo
from services.payment.domain.value_object import PaymentId
from services.shared.domain import Repository


class PaymentRepository(Repository[PaymentInfo, PaymentId]):
    """決済リポジトリのインターフェース"""

    @abstractmethod
    def create(self, payment: PaymentInfo) -> PaymentInfo:
        """決済を保存し、採番した ID を持つ決済を返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, payment_id: PaymentId) -> PaymentInfo | None:
        """決済IDで検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_passenger_id(self, passenger_id: PassengerId) -> list[PaymentInfo]:
        """乗客IDに紐づく決済を検索する"""
        raise NotImplementedError
