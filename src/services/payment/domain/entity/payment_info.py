import copy

from services.passenger.domain.value_object import PassengerId
from services.payment.domain.value_object import AccountNumber, PaymentId
from services.shared.domain import Entity, Money
from services.shared.domain.exception import BusinessRuleViolationException


class PaymentInfo(Entity[PaymentId]):
    """決済情報エンティティ

    乗客の保存後に生成し、採番済みの乗客IDを保持する。
    """

    def __init__(
        self,
        account_number: AccountNumber,
        amount: Money,
        passenger_id: PassengerId,
        id: PaymentId | None = None,
    ) -> None:
        super().__init__(id)
        self._account_number = account_number
        self._amount = amount
        self._passenger_id = passenger_id

    @property
    def account_number(self) -> AccountNumber:
        return self._account_number

    @property
    def amount(self) -> Money:
        return self._amount

    @property
    def passenger_id(self) -> PassengerId:
        return self._passenger_id

    def with_id(self, payment_id: PaymentId) -> "PaymentInfo":
        """ストアが採番した ID を持つコピーを返す（採番は一度きり）"""
        if self._id is not None:
            raise BusinessRuleViolationException(
                f"Payment already has an id: {self._id}"
            )
        saved = copy.copy(self)
        saved._id = payment_id
        return saved
