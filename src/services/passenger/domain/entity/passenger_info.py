import copy

from services.passenger.domain.value_object import PassengerId, PassengerName, TravelDate
from services.shared.domain import Entity, Money
from services.shared.domain.exception import BusinessRuleViolationException


class PassengerInfo(Entity[PassengerId]):
    """乗客情報エンティティ

    予約リクエストごとに生成され、ID は Passenger Store が採番する。
    保存後は明示的な更新操作以外で変更されない。
    """

    def __init__(
        self,
        name: PassengerName,
        email: str,
        source: str,
        destination: str,
        travel_date: TravelDate,
        pickup_time: str,
        arrival_time: str,
        fare: Money,
        id: PassengerId | None = None,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._email = email
        self._source = source
        self._destination = destination
        self._travel_date = travel_date
        self._pickup_time = pickup_time
        self._arrival_time = arrival_time
        self._fare = fare

    @property
    def name(self) -> PassengerName:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def source(self) -> str:
        return self._source

    @property
    def destination(self) -> str:
        return self._destination

    @property
    def travel_date(self) -> TravelDate:
        return self._travel_date

    @property
    def pickup_time(self) -> str:
        return self._pickup_time

    @property
    def arrival_time(self) -> str:
        return self._arrival_time

    @property
    def fare(self) -> Money:
        return self._fare

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    def with_id(self, passenger_id: PassengerId) -> "PassengerInfo":
        """ストアが採番した ID を持つコピーを返す（採番は一度きり）"""
        if self._id is not None:
            raise BusinessRuleViolationException(
                f"Passenger already has an id: {self._id}"
            )
        saved = copy.copy(self)
        saved._id = passenger_id
        return saved

    def to_dict(self) -> dict:
        """永続化用の辞書表現を返す"""
        return {
            "passenger_id": self._id.value if self._id is not None else None,
            "name": str(self._name),
            "email": self._email,
            "source": self._source,
            "destination": self._destination,
            "travel_date": str(self._travel_date),
            "pickup_time": self._pickup_time,
            "arrival_time": self._arrival_time,
            "fare": str(self._fare),
        }
