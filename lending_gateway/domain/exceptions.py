"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    kind = "DomainError"


class InvalidArgumentError(DomainException):
    """Pricing input cannot produce a finite result (e.g. tenure below one month)"""

    kind = "InvalidArgument"


class LoanRequestOutOfBoundsError(DomainException):
    """Loan amount or tenure falls outside the platform's advertised limits"""

    kind = "OutOfBounds"
