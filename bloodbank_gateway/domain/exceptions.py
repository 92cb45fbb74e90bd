"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidBloodType(DomainException):
    """Blood type is not one of the eight ABO/Rh groups"""

    pass


class InvalidDateRange(DomainException):
    """Last donation date lies after the reference date"""

    pass


class InvalidInput(DomainException):
    """Scoring input is malformed (e.g. negative donation count)"""

    pass
