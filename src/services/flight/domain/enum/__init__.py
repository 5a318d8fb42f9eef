from .acknowledgement_status import AcknowledgementStatus as AcknowledgementStatus
