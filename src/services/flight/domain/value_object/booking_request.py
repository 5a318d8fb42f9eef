from dataclasses import dataclass

from services.passenger.domain.entity import PassengerInfo
from services.payment.domain.value_object import AccountNumber


@dataclass(frozen=True)
class BookingRequest:
    """予約リクエスト（未保存の乗客情報 + 支払口座）

    永続化はされない。
    """

    passenger: PassengerInfo
    account_number: AccountNumber
