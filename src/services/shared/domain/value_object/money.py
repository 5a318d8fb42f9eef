from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from services.shared.utils import to_decimal


@dataclass(frozen=True)
class Money:
    """金額（運賃・与信枠・決済額に共通）

    単一通貨を前提とし、負の値は許容しない。
    数値に変換できない値は ValueError とする。
    """

    amount: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))
        if not self.amount.is_finite():
            raise ValueError(f"Invalid amount: {self.amount}")
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return str(self.amount)

    def exceeds(self, other: Money) -> bool:
        """他の金額を上回るかどうか"""
        return self.amount > other.amount

    @classmethod
    def of(cls, amount: Decimal | int | float | str) -> Money:
        """プリミティブ型から Money を生成"""
        return cls(amount=amount)
