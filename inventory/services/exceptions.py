"""Service-level exceptions for the file-driven demos."""

from decimal import Decimal


class ServiceError(Exception):
    """Base exception for demo service failures."""
    pass


class StudentFileError(ServiceError):
    """A line of a student input file could not be turned into a Student."""

    def __init__(self, line_number: int, message: str):
        self.line_number = line_number
        super().__init__(f"Line {line_number}: {message}")


class MissingFieldError(StudentFileError):
    """Raised when a line does not carry exactly ID, Name and Score."""
    pass


class InvalidScoreFormatError(StudentFileError):
    """Raised when the ID or score on a line is not an integer."""
    pass


class InsufficientFundsError(ServiceError):
    """Raised when a savings account cannot cover a transaction."""

    def __init__(self, account_number: str, amount: Decimal, balance: Decimal):
        self.account_number = account_number
        self.amount = amount
        self.balance = balance
        super().__init__(
            f"Insufficient funds in {account_number}: attempted to deduct "
            f"${amount:.2f}, but balance is only ${balance:.2f}"
        )
