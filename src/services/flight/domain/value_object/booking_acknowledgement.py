from dataclasses import dataclass

from services.flight.domain.enum import AcknowledgementStatus
from services.flight.domain.value_object.reference_code import ReferenceCode
from services.passenger.domain.entity import PassengerInfo
from services.shared.domain import Money


@dataclass(frozen=True)
class BookingAcknowledgement:
    """予約受付結果

    リクエストごとに生成し、保存はしない。
    """

    status: AcknowledgementStatus
    total_fare: Money
    reference_code: ReferenceCode
    passenger: PassengerInfo
