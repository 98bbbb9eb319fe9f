class DomainException(Exception):
    """Base exception raised by the domain layer"""

    pass


class ResourceNotFoundException(DomainException):
    """A requested resource does not exist"""

    pass


class InvalidInputException(DomainException):
    """A required value is missing or outside its allowed range"""

    pass
