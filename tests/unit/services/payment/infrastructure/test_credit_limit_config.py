import pytest

from services.payment.domain.value_object import AccountNumber, CreditLimitTable
from services.payment.infrastructure.credit_limit_config import (
    load_credit_limit_table,
)
from services.shared.domain import Money


class TestLoadCreditLimitTable:
    def test_default_table_when_env_is_unset(self, monkeypatch):
        monkeypatch.delenv("CREDIT_LIMITS", raising=False)
        assert load_credit_limit_table() == CreditLimitTable.default()

    def test_table_from_env(self, monkeypatch):
        monkeypatch.setenv("CREDIT_LIMITS", '{"vip": 50000, "basic": "1000.50"}')

        table = load_credit_limit_table()

        assert len(table) == 2
        assert table.limit_for(AccountNumber("vip")) == Money.of("50000")
        assert table.limit_for(AccountNumber("basic")) == Money.of("1000.50")

    def test_float_limit_keeps_decimal_text(self):
        table = load_credit_limit_table('{"acc1": 0.1}')
        assert table.limit_for(AccountNumber("acc1")).amount == Money.of("0.1").amount

    def test_invalid_json_raises_error(self):
        with pytest.raises(ValueError, match="not valid JSON"):
            load_credit_limit_table("{not json")

    def test_non_object_raises_error(self):
        with pytest.raises(ValueError, match="must be a JSON object"):
            load_credit_limit_table('["acc1"]')

    @pytest.mark.parametrize(
        "raw",
        [
            '{"acc1": null}',
            '{"acc1": true}',
            '{"acc1": "abc"}',
            '{"acc1": {"limit": 100}}',
            '{"acc1": -1}',
        ],
    )
    def test_invalid_limit_value_raises_value_error(self, raw):
        with pytest.raises(ValueError, match="has an invalid limit"):
            load_credit_limit_table(raw)

    def test_blank_account_raises_value_error(self):
        with pytest.raises(ValueError, match="has an invalid limit"):
            load_credit_limit_table('{" ": 100}')
