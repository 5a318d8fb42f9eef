from services.passenger.domain.entity import PassengerInfo
from services.passenger.domain.repository import PassengerRepository
from services.passenger.domain.value_object import PassengerId
from services.shared.domain.exception import ResourceNotFoundException


class GetPassengerService:
    """乗客情報取得サービス"""

    def __init__(self, repository: PassengerRepository) -> None:
        self._repository = repository

    def get(self, passenger_id: PassengerId) -> PassengerInfo:
        """乗客を取得する。存在しない場合は ResourceNotFoundException"""
        passenger = self._repository.find_by_id(passenger_id)
        if passenger is None:
            raise ResourceNotFoundException(f"Passenger not found: {passenger_id}")
        return passenger
