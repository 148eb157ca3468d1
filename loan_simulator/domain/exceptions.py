"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidLoanInputError(DomainException):
    """A LoanInput was built from values the validator would have rejected"""

    pass
