"""Services for accounts business logic."""

from .exceptions import (
    BankServiceError,
    AccountNotFoundError,
    AccountAlreadyExistsError,
    BalanceOverflowError,
    InvalidPinCodeError,
    InsufficientFundsError,
    SameAccountTransferError,
)
from .account_management import get_accounts, create_account
from .balance_operations import make_deposit, withdraw, transfer

__all__ = [
    # Exceptions
    'BankServiceError',
    'AccountNotFoundError',
    'AccountAlreadyExistsError',
    'BalanceOverflowError',
    'InvalidPinCodeError',
    'InsufficientFundsError',
    'SameAccountTransferError',
    # Services
    'get_accounts',
    'create_account',
    'make_deposit',
    'withdraw',
    'transfer',
]
