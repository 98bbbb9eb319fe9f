from .entity import Reservation as Reservation
from .value_object import Customer as Customer
