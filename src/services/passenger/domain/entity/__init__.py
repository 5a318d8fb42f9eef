from .passenger_info import PassengerInfo as PassengerInfo
