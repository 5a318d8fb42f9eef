from .exceptions import InsufficientFundsException as InsufficientFundsException
from .exceptions import UnknownAccountException as UnknownAccountException
