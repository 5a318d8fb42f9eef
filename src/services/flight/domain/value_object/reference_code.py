from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class ReferenceCode:
    """予約参照コード

    利用者に提示する短いトークン（UUID 先頭 8 桁の16進数）。
    主キーではなく、一意性は確率的なもの。
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[0-9a-f]{8}$")

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValueError(f"Invalid reference code format: {self.value!r}")
        normalized = self.value.lower()
        if not self.PATTERN.match(normalized):
            raise ValueError(f"Invalid reference code format: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> ReferenceCode:
        """ランダムな参照コードを生成"""
        return cls(value=str(uuid.uuid4()).split("-")[0])
