from botocore.exceptions import ClientError

from services.shared.domain.exception import StoreFailureException


class DynamoDBSequence:
    """DynamoDB のアトミックカウンタを使った連番採番

    PK=SEQUENCE#<name>, SK=SEQUENCE のアイテムに ADD で加算し、
    更新後の値を次の ID として返す。
    """

    def __init__(self, table, name: str) -> None:
        self._table = table
        self._name = name

    def next_value(self) -> int:
        """次の連番を取得する"""
        try:
            response = self._table.update_item(
                Key={"PK": f"SEQUENCE#{self._name}", "SK": "SEQUENCE"},
                UpdateExpression="ADD #value :one",
                ExpressionAttributeNames={"#value": "current_value"},
                ExpressionAttributeValues={":one": 1},
                ReturnValues="UPDATED_NEW",
            )
        except ClientError as e:
            raise StoreFailureException(
                f"Failed to allocate id from sequence: {self._name}"
            ) from e
        return int(response["Attributes"]["current_value"])
