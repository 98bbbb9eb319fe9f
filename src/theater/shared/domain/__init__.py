from .exception import (
    DomainException as DomainException,
)
from .exception import (
    InvalidInputException as InvalidInputException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .repository import Repository as Repository
from .value_object import (
    Currency as Currency,
)
from .value_object import (
    Money as Money,
)
