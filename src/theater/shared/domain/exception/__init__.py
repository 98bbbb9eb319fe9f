from .exceptions import (
    DomainException as DomainException,
)
from .exceptions import (
    InvalidInputException as InvalidInputException,
)
from .exceptions import (
    ResourceNotFoundException as ResourceNotFoundException,
)
