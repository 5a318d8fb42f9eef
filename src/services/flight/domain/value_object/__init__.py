from .booking_acknowledgement import BookingAcknowledgement as BookingAcknowledgement
from .booking_request import BookingRequest as BookingRequest
from .reference_code import ReferenceCode as ReferenceCode
