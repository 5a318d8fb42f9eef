from decimal import Decimal

import pytest

from services.shared.utils import to_decimal


class TestToDecimal:
    def test_decimal_is_returned_as_is(self):
        value = Decimal("1.5")
        assert to_decimal(value) is value

    def test_int_and_float_are_converted(self):
        assert to_decimal(4000) == Decimal("4000")
        assert to_decimal(4000.5) == Decimal("4000.5")

    def test_numeric_string_is_converted(self):
        assert to_decimal("12000.0") == Decimal("12000.0")

    def test_invalid_string_raises_value_error(self):
        with pytest.raises(ValueError, match="Invalid decimal value"):
            to_decimal("abc")

    def test_bool_raises_value_error(self):
        with pytest.raises(ValueError, match="Invalid decimal value"):
            to_decimal(True)
