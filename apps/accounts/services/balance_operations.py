"""
Balance operations service.

Deposits, withdrawals and transfers. Each call runs in one database
transaction: either every balance change is saved or none is.
"""

import logging
import math

from django.db import transaction

from apps.accounts.models import Account

from .exceptions import (
    AccountNotFoundError,
    BalanceOverflowError,
    InvalidPinCodeError,
    InsufficientFundsError,
    SameAccountTransferError,
)

logger = logging.getLogger(__name__)


def _get_account(name: str, operation: str) -> Account:
    account = Account.objects.find_by_name(name)
    if account is None:
        logger.error("%s(): account %r not found", operation, name)
        raise AccountNotFoundError(f"Account {name} not found")
    return account


def _check_pin_code(account: Account, pin_code: str, operation: str) -> None:
    if not account.pin_matches(pin_code):
        logger.error("%s(): invalid pin code for account %r", operation, account.name)
        raise InvalidPinCodeError("Invalid pin code")


def _check_funds(account: Account, amount: float, operation: str) -> None:
    if account.balance < amount:
        logger.error(
            "%s(): account %r has balance %s, requested %s",
            operation, account.name, account.balance, amount,
        )
        raise InsufficientFundsError(
            f"Sum is higher than balance on account {account.name}"
        )


def _credited_balance(account: Account, amount: float, operation: str) -> float:
    balance = account.balance + amount
    if not math.isfinite(balance):
        logger.error(
            "%s(): crediting %s would overflow balance of account %r",
            operation, amount, account.name,
        )
        raise BalanceOverflowError(f"Balance limit exceeded on account {account.name}")
    return balance


@transaction.atomic
def make_deposit(*, name: str, pin_code: str, amount: float) -> Account:
    """
    Add money to an account.

    Args:
        name: Account name
        pin_code: PIN code of the account
        amount: Positive sum to add

    Returns:
        Updated Account instance

    Raises:
        AccountNotFoundError: If the account doesn't exist
        InvalidPinCodeError: If the PIN code doesn't match
        BalanceOverflowError: If the new balance is out of range
    """
    account = _get_account(name, 'make_deposit')
    _check_pin_code(account, pin_code, 'make_deposit')

    account.balance = _credited_balance(account, amount, 'make_deposit')
    account.save(update_fields=['balance', 'updated_at'])

    logger.info("Deposited %s on account %r", amount, name)
    return account


@transaction.atomic
def withdraw(*, name: str, pin_code: str, amount: float) -> Account:
    """
    Take money from an account.

    Raises:
        AccountNotFoundError: If the account doesn't exist
        InvalidPinCodeError: If the PIN code doesn't match
        InsufficientFundsError: If the balance is lower than amount
    """
    account = _get_account(name, 'withdraw')
    _check_pin_code(account, pin_code, 'withdraw')
    _check_funds(account, amount, 'withdraw')

    account.balance -= amount
    account.save(update_fields=['balance', 'updated_at'])

    logger.info("Withdrew %s from account %r", amount, name)
    return account


@transaction.atomic
def transfer(*, name_from: str, name_to: str, pin_code: str, amount: float) -> Account:
    """
    Move money from one account to another.

    Only the sender's PIN code is checked.

    Args:
        name_from: Sender account name
        name_to: Recipient account name
        pin_code: PIN code of the sender
        amount: Positive sum to move

    Returns:
        Updated sender Account instance

    Raises:
        AccountNotFoundError: If either account doesn't exist
        SameAccountTransferError: If sender and recipient are the same
        InvalidPinCodeError: If the sender PIN code doesn't match
        InsufficientFundsError: If the sender balance is lower than amount
        BalanceOverflowError: If the recipient balance would go out of range
    """
    sender = _get_account(name_from, 'transfer')
    recipient = _get_account(name_to, 'transfer')

    if sender.pk == recipient.pk:
        logger.error("transfer(): account %r tried to transfer to itself", name_from)
        raise SameAccountTransferError("Sender and recipient must be different accounts")

    _check_pin_code(sender, pin_code, 'transfer')
    _check_funds(sender, amount, 'transfer')

    recipient.balance = _credited_balance(recipient, amount, 'transfer')
    sender.balance -= amount
    sender.save(update_fields=['balance', 'updated_at'])
    recipient.save(update_fields=['balance', 'updated_at'])

    logger.info("Transferred %s from account %r to %r", amount, name_from, name_to)
    return sender
