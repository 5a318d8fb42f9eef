from .validators import to_decimal as to_decimal
