from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import ClassVar


@dataclass(frozen=True)
class TravelDate:
    """搭乗日

    ISO 8601（YYYY-MM-DD）に加え、DD-MM-YYYY 形式も受け付ける。
    """

    value: date

    INPUT_FORMATS: ClassVar[tuple[str, ...]] = ("%Y-%m-%d", "%d-%m-%Y")

    @classmethod
    def from_string(cls, s: str) -> TravelDate:
        """日付文字列から生成"""
        for fmt in cls.INPUT_FORMATS:
            try:
                return cls(value=datetime.strptime(s.strip(), fmt).date())
            except ValueError:
                continue
        raise ValueError(f"Invalid travel date: {s}. Expected YYYY-MM-DD or DD-MM-YYYY")

    def __str__(self) -> str:
        return self.value.isoformat()
