from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from services.flight.domain.value_object import BookingAcknowledgement
from services.passenger.domain.entity import PassengerInfo


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PassengerData(_CamelModel):
    """乗客データのレスポンスモデル"""

    id: int
    name: str
    email: str
    source: str
    destination: str
    travel_date: str
    pickup_time: str
    arrival_time: str
    fare: float


class BookingAcknowledgementResponse(_CamelModel):
    """予約受付の成功レスポンスモデル"""

    status: str = "success"
    total_fare: float
    reference_code: str
    passenger: PassengerData


class ErrorResponse(_CamelModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: list | None = None


def _to_passenger_data(passenger: PassengerInfo) -> PassengerData:
    return PassengerData(
        id=passenger.id.value,
        name=str(passenger.name),
        email=passenger.email,
        source=passenger.source,
        destination=passenger.destination,
        travel_date=str(passenger.travel_date),
        pickup_time=passenger.pickup_time,
        arrival_time=passenger.arrival_time,
        fare=float(passenger.fare.amount),
    )


def to_response(acknowledgement: BookingAcknowledgement) -> dict:
    """受付結果をレスポンス辞書に変換する"""
    return BookingAcknowledgementResponse(
        status=acknowledgement.status.value,
        total_fare=float(acknowledgement.total_fare.amount),
        reference_code=str(acknowledgement.reference_code),
        passenger=_to_passenger_data(acknowledgement.passenger),
    ).model_dump(by_alias=True)


def error_response(error_code: str, message: str, details: list | None = None) -> dict:
    """エラーレスポンスを生成"""
    return ErrorResponse(
        error_code=error_code,
        message=message,
        details=details,
    ).model_dump(by_alias=True, exclude_none=True)
