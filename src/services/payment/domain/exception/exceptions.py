from services.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class InsufficientFundsException(BusinessRuleViolationException):
    """決済額が口座の与信枠を超えている場合"""

    pass


class UnknownAccountException(ResourceNotFoundException):
    """与信枠テーブルに口座が登録されていない場合"""

    pass
