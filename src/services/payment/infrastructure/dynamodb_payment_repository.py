import os
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.passenger.domain.value_object import PassengerId
from services.payment.domain.entity import PaymentInfo
from services.payment.domain.repository import PaymentRepository
from services.payment.domain.value_object import AccountNumber, PaymentId
from services.shared.domain import Money
from services.shared.domain.exception import (
    DuplicateResourceException,
    StoreFailureException,
)
from services.shared.infrastructure import DynamoDBSequence


class DynamoDBPaymentRepository(PaymentRepository):
    """DynamoDBを使用したPaymentRepository の具象実装

    決済は乗客のパーティション（PK=PASSENGER#<id>）配下に保存する。
    """

    def __init__(self, table_name: str | None = None, table=None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        if table is None:
            self.dynamodb = boto3.resource("dynamodb")
            table = self.dynamodb.Table(self.table_name)
        self.table = table
        self.sequence = DynamoDBSequence(self.table, "PAYMENT")

    def create(self, payment: PaymentInfo) -> PaymentInfo:
        """決済をDBに保存し、採番した ID を持つ決済を返す"""
        payment_id = PaymentId(self.sequence.next_value())
        saved = payment.with_id(payment_id)

        item = {
            "PK": f"PASSENGER#{payment.passenger_id}",
            "SK": f"PAYMENT#{payment_id}",
            "entity_type": "PAYMENT",
            "payment_id": payment_id.value,
            "passenger_id": payment.passenger_id.value,
            "account_number": str(payment.account_number),
            "amount": str(payment.amount),
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("SK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Payment already exists: {payment_id}"
                ) from e
            raise StoreFailureException(f"Failed to save payment: {payment_id}") from e

        return saved

    def find_by_id(self, payment_id: PaymentId) -> PaymentInfo | None:
        """決済IDで検索

        Scan は 1 ページごとにフィルタが適用されるため、
        見つかるか LastEvaluatedKey がなくなるまでページを辿る。
        """
        scan_kwargs = {
            "FilterExpression": Attr("entity_type").eq("PAYMENT")
            & Attr("payment_id").eq(payment_id.value),
            "ConsistentRead": True,
        }
        while True:
            try:
                response = self.table.scan(**scan_kwargs)
            except ClientError as e:
                raise StoreFailureException(
                    f"Failed to load payment: {payment_id}"
                ) from e

            items = response.get("Items", [])
            if items:
                return self._to_entity(items[0])

            last_evaluated_key = response.get("LastEvaluatedKey")
            if not last_evaluated_key:
                return None
            scan_kwargs["ExclusiveStartKey"] = last_evaluated_key

    def find_by_passenger_id(self, passenger_id: PassengerId) -> list[PaymentInfo]:
        """乗客IDで決済を検索する"""
        query_kwargs = {
            "KeyConditionExpression": Key("PK").eq(f"PASSENGER#{passenger_id}")
            & Key("SK").begins_with("PAYMENT#"),
            "ConsistentRead": True,
        }
        payments = []
        while True:
            try:
                response = self.table.query(**query_kwargs)
            except ClientError as e:
                raise StoreFailureException(
                    f"Failed to load payments for passenger: {passenger_id}"
                ) from e

            payments.extend(
                self._to_entity(item) for item in response.get("Items", [])
            )

            last_evaluated_key = response.get("LastEvaluatedKey")
            if not last_evaluated_key:
                return payments
            query_kwargs["ExclusiveStartKey"] = last_evaluated_key

    def _to_entity(self, item: dict) -> PaymentInfo:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return PaymentInfo(
            id=PaymentId(int(item["payment_id"])),
            account_number=AccountNumber(item["account_number"]),
            amount=Money(amount=Decimal(item["amount"])),
            passenger_id=PassengerId(int(item["passenger_id"])),
        )
