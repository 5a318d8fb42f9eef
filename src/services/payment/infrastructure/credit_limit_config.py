import json
import os

from services.payment.domain.value_object import CreditLimitTable

CREDIT_LIMITS_ENV = "CREDIT_LIMITS"


def load_credit_limit_table(raw: str | None = None) -> CreditLimitTable:
    """環境変数 CREDIT_LIMITS（JSON）から与信枠テーブルを構築する

    未設定の場合は既定の与信枠を使う。
    例: CREDIT_LIMITS='{"acc1": 12000, "acc2": "10000.0"}'
    """
    if raw is None:
        raw = os.getenv(CREDIT_LIMITS_ENV)
    if not raw:
        return CreditLimitTable.default()

    try:
        limits = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"{CREDIT_LIMITS_ENV} is not valid JSON") from e

    if not isinstance(limits, dict):
        raise ValueError(f"{CREDIT_LIMITS_ENV} must be a JSON object")

    # float は Money 側で文字列経由の Decimal に変換される
    try:
        return CreditLimitTable.from_mapping(limits)
    except ValueError as e:
        raise ValueError(f"{CREDIT_LIMITS_ENV} has an invalid limit: {e}") from e
