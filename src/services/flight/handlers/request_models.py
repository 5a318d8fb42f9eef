from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from services.shared.utils import to_decimal


class PassengerInfoRequest(BaseModel):
    """乗客情報の入力スキーマ"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=100, description="乗客名")
    email: str = Field(
        ...,
        pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
        description="メールアドレス",
        examples=["taro@example.com"],
    )
    source: str = Field(..., min_length=1, description="出発地")
    destination: str = Field(..., min_length=1, description="目的地")
    travel_date: str = Field(
        ...,
        description="搭乗日（YYYY-MM-DD または DD-MM-YYYY）",
        examples=["2024-01-01", "01-01-2024"],
    )
    pickup_time: str = Field(..., description="出発時刻", examples=["10:00"])
    arrival_time: str = Field(..., description="到着時刻", examples=["12:00"])
    fare: Decimal = Field(..., ge=0, description="運賃（0以上）", examples=[4000])

    @field_validator("fare", mode="before")
    @classmethod
    def convert_fare_to_decimal(cls, v):
        return to_decimal(v)


class PaymentInfoRequest(BaseModel):
    """支払情報の入力スキーマ"""

    account_number: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("accountNumber", "account_number", "accountNo"),
        description="口座番号",
        examples=["acc1"],
    )


class BookFlightRequest(BaseModel):
    """航空券予約リクエストスキーマ"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "passengerInfo": {
                        "name": "Taro Yamada",
                        "email": "taro@example.com",
                        "source": "Tokyo",
                        "destination": "Osaka",
                        "travelDate": "2024-01-01",
                        "pickupTime": "10:00",
                        "arrivalTime": "12:00",
                        "fare": 4000,
                    },
                    "paymentInfo": {"accountNumber": "acc3"},
                }
            ]
        },
    )

    passenger_info: PassengerInfoRequest
    payment_info: PaymentInfoRequest
