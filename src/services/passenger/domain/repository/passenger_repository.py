from abc import abstractmethod

from services.passenger.domain.entity import PassengerInfo
from services.passenger.domain.value_object import PassengerId
from services.shared.domain import Repository


class PassengerRepository(Repository[PassengerInfo, PassengerId]):
    """乗客リポジトリのインターフェース

    Domain 層で定義し、具象実装は Infrastructure 層で行う。
    """

    @abstractmethod
    def create(self, passenger: PassengerInfo) -> PassengerInfo:
        """乗客を保存し、採番した ID を持つ乗客を返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, passenger_id: PassengerId) -> PassengerInfo | None:
        """乗客IDで検索する"""
        raise NotImplementedError
