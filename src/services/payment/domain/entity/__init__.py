from .payment_info import PaymentInfo as PaymentInfo
