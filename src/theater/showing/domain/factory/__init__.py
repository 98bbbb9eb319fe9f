from .showing_factory import ShowingDetails as ShowingDetails
from .showing_factory import ShowingFactory as ShowingFactory
