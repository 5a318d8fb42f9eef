from decimal import Decimal
from typing import TypedDict

from services.passenger.domain.entity import PassengerInfo
from services.passenger.domain.value_object import PassengerName, TravelDate
from services.shared.domain import Money


class PassengerDetails(TypedDict):
    """乗客情報の入力データ構造"""

    name: str
    email: str
    source: str
    destination: str
    travel_date: str
    pickup_time: str
    arrival_time: str
    fare: Decimal


class PassengerFactory:
    """乗客エンティティのファクトリ

    - プリミティブ型から Value Object への変換
    - ID は未採番のまま生成する（採番は Passenger Store の責務）
    """

    def create(self, passenger_details: PassengerDetails) -> PassengerInfo:
        """未保存の乗客エンティティを生成する"""
        return PassengerInfo(
            name=PassengerName(passenger_details["name"]),
            email=passenger_details["email"],
            source=passenger_details["source"],
            destination=passenger_details["destination"],
            travel_date=TravelDate.from_string(passenger_details["travel_date"]),
            pickup_time=passenger_details["pickup_time"],
            arrival_time=passenger_details["arrival_time"],
            fare=Money(amount=passenger_details["fare"]),
        )
