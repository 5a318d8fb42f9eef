from .passenger_factory import PassengerDetails as PassengerDetails
from .passenger_factory import PassengerFactory as PassengerFactory
