from .account_number import AccountNumber as AccountNumber
from .credit_limit_table import CreditLimitTable as CreditLimitTable
from .payment_id import PaymentId as PaymentId
