from .enum import AcknowledgementStatus as AcknowledgementStatus
from .value_object import BookingAcknowledgement as BookingAcknowledgement
from .value_object import BookingRequest as BookingRequest
from .value_object import ReferenceCode as ReferenceCode
