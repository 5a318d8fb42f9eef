from .entity import PaymentInfo as PaymentInfo
from .exception import InsufficientFundsException as InsufficientFundsException
from .exception import UnknownAccountException as UnknownAccountException
from .factory import PaymentFactory as PaymentFactory
from .repository import PaymentRepository as PaymentRepository
from .service import CreditValidator as CreditValidator
from .value_object import AccountNumber as AccountNumber
from .value_object import CreditLimitTable as CreditLimitTable
from .value_object import PaymentId as PaymentId
