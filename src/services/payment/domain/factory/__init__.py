from .payment_factory import PaymentFactory as PaymentFactory
