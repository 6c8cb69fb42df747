"""
Domain-specific exceptions for accounts services.

These exceptions represent business rule violations and are
caught in views and converted to HTTP responses.
"""


class BankServiceError(Exception):
    """Base exception for accounts services."""
    pass


class AccountNotFoundError(BankServiceError):
    """Raised when no account has the given name."""
    pass


class AccountAlreadyExistsError(BankServiceError):
    """Raised when creating an account under a name that is taken."""
    pass


class InvalidPinCodeError(BankServiceError):
    """Raised when the PIN code does not match the account."""
    pass


class InsufficientFundsError(BankServiceError):
    """Raised when the balance is lower than the requested amount."""
    pass


class SameAccountTransferError(BankServiceError):
    """Raised when sender and recipient are the same account."""
    pass


class BalanceOverflowError(BankServiceError):
    """Raised when a credit would push a balance out of the float range."""
    pass
