from .credit_validator import CreditValidator as CreditValidator
