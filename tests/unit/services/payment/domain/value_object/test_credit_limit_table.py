from decimal import Decimal

import pytest

from services.payment.domain.exception import UnknownAccountException
from services.payment.domain.value_object import AccountNumber, CreditLimitTable
from services.shared.domain import Money


class TestCreditLimitTable:
    def test_default_limits(self):
        table = CreditLimitTable.default()

        assert len(table) == 4
        assert table.limit_for(AccountNumber("acc1")) == Money.of("12000.0")
        assert table.limit_for(AccountNumber("acc2")) == Money.of("10000.0")
        assert table.limit_for(AccountNumber("acc3")) == Money.of("5000.0")
        assert table.limit_for(AccountNumber("acc4")) == Money.of("8000.0")

    def test_unknown_account_raises_error(self):
        table = CreditLimitTable.default()
        with pytest.raises(UnknownAccountException, match="Unknown account: acc9"):
            table.limit_for(AccountNumber("acc9"))

    def test_contains(self):
        table = CreditLimitTable.from_mapping({"vip": 100})
        assert AccountNumber("vip") in table
        assert AccountNumber("acc1") not in table

    def test_limits_are_read_only(self):
        table = CreditLimitTable.default()
        with pytest.raises(TypeError):
            table.limits[AccountNumber("acc9")] = Money.of("1")

    def test_source_mapping_changes_do_not_leak(self):
        source = {AccountNumber("acc1"): Money(amount=Decimal("100"))}
        table = CreditLimitTable(limits=source)
        source[AccountNumber("acc2")] = Money(amount=Decimal("200"))

        assert AccountNumber("acc2") not in table

    def test_negative_limit_raises_error(self):
        with pytest.raises(ValueError, match="Amount cannot be negative"):
            CreditLimitTable.from_mapping({"acc1": -1})
