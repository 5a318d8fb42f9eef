from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType

from services.payment.domain.exception import UnknownAccountException
from services.payment.domain.value_object.account_number import AccountNumber
from services.shared.domain import Money


@dataclass(frozen=True)
class CreditLimitTable:
    """口座ごとの与信枠テーブル

    生成時に明示的に構築し、以降は読み取り専用。
    プロセス全体のシングルトンにはせず、CreditValidator に注入して使う。
    """

    limits: Mapping[AccountNumber, Money] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "limits", MappingProxyType(dict(self.limits)))

    def __contains__(self, account_number: object) -> bool:
        return account_number in self.limits

    def __len__(self) -> int:
        return len(self.limits)

    def limit_for(self, account_number: AccountNumber) -> Money:
        """口座の与信枠を返す。未登録の口座は UnknownAccountException"""
        try:
            return self.limits[account_number]
        except KeyError:
            raise UnknownAccountException(
                f"Unknown account: {account_number}"
            ) from None

    @classmethod
    def from_mapping(
        cls, limits: Mapping[str, Decimal | int | float | str]
    ) -> CreditLimitTable:
        """プリミティブ型の辞書から生成"""
        return cls(
            limits={
                AccountNumber(account): Money.of(limit)
                for account, limit in limits.items()
            }
        )

    @classmethod
    def default(cls) -> CreditLimitTable:
        """既定の与信枠"""
        return cls.from_mapping(
            {
                "acc1": Decimal("12000.0"),
                "acc2": Decimal("10000.0"),
                "acc3": Decimal("5000.0"),
                "acc4": Decimal("8000.0"),
            }
        )
