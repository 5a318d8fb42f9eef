from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentId:
    """決済ID（Value Object）

    ストアが採番する正の整数。不変で、値が同じなら同一とみなされる。
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"PaymentId must be an integer: {self.value!r}")
        if self.value <= 0:
            raise ValueError(f"PaymentId must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)
