from .entity import PassengerInfo as PassengerInfo
from .factory import PassengerDetails as PassengerDetails
from .factory import PassengerFactory as PassengerFactory
from .repository import PassengerRepository as PassengerRepository
from .value_object import PassengerId as PassengerId
from .value_object import PassengerName as PassengerName
from .value_object import TravelDate as TravelDate
