from dataclasses import dataclass


@dataclass(frozen=True)
class AccountNumber:
    """口座番号（与信枠テーブルのキー）"""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Account number cannot be empty")
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value
