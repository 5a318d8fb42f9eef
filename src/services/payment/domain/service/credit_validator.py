from services.payment.domain.exception import InsufficientFundsException
from services.payment.domain.value_object import AccountNumber, CreditLimitTable
from services.shared.domain import Money


class CreditValidator:
    """与信枠チェック（ドメインサービス）"""

    def __init__(self, limits: CreditLimitTable) -> None:
        self._limits = limits

    def validate(self, account_number: AccountNumber, amount: Money) -> bool:
        """決済額が与信枠内かを検証する

        Raises:
            UnknownAccountException: 口座が与信枠テーブルに存在しない
            InsufficientFundsException: 決済額が与信枠を超えている
        """
        limit = self._limits.limit_for(account_number)
        if amount.exceeds(limit):
            raise InsufficientFundsException(
                f"Insufficient funds: account={account_number}, "
                f"amount={amount}, limit={limit}"
            )
        return True
