import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from services.passenger.domain.entity import PassengerInfo
from services.passenger.domain.repository import PassengerRepository
from services.passenger.domain.value_object import PassengerId, PassengerName, TravelDate
from services.shared.domain import Money
from services.shared.domain.exception import (
    DuplicateResourceException,
    StoreFailureException,
)
from services.shared.infrastructure import DynamoDBSequence


class DynamoDBPassengerRepository(PassengerRepository):
    """DynamoDBを使用したPassengerRepository の具象実装"""

    def __init__(self, table_name: str | None = None, table=None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        if table is None:
            self.dynamodb = boto3.resource("dynamodb")
            table = self.dynamodb.Table(self.table_name)
        self.table = table
        self.sequence = DynamoDBSequence(self.table, "PASSENGER")

    def create(self, passenger: PassengerInfo) -> PassengerInfo:
        """乗客をDBに保存し、採番した ID を持つ乗客を返す"""
        passenger_id = PassengerId(self.sequence.next_value())
        saved = passenger.with_id(passenger_id)

        item = {
            "PK": f"PASSENGER#{passenger_id}",
            "SK": "PROFILE",
            "entity_type": "PASSENGER",
            **saved.to_dict(),
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Passenger already exists: {passenger_id}"
                ) from e
            raise StoreFailureException(
                f"Failed to save passenger: {passenger_id}"
            ) from e

        return saved

    def find_by_id(self, passenger_id: PassengerId) -> PassengerInfo | None:
        """乗客IDで検索"""
        try:
            response = self.table.get_item(
                Key={"PK": f"PASSENGER#{passenger_id}", "SK": "PROFILE"},
                ConsistentRead=True,
            )
        except ClientError as e:
            raise StoreFailureException(
                f"Failed to load passenger: {passenger_id}"
            ) from e

        item = response.get("Item")
        if item is None:
            return None
        return self._to_entity(item)

    def _to_entity(self, item: dict) -> PassengerInfo:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return PassengerInfo(
            id=PassengerId(int(item["passenger_id"])),
            name=PassengerName(item["name"]),
            email=item["email"],
            source=item["source"],
            destination=item["destination"],
            travel_date=TravelDate.from_string(item["travel_date"]),
            pickup_time=item["pickup_time"],
            arrival_time=item["arrival_time"],
            fare=Money(amount=Decimal(item["fare"])),
        )
