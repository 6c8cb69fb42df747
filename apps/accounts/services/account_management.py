"""Account management service."""

import logging
from typing import List

from django.db import transaction, IntegrityError

from apps.accounts.models import Account

from .exceptions import AccountAlreadyExistsError

logger = logging.getLogger(__name__)


def get_accounts() -> List[Account]:
    """Return all accounts ordered by id."""
    return list(Account.objects.all())


@transaction.atomic
def create_account(*, name: str, pin_code: str) -> Account:
    """
    Open a new account with a zero balance.

    Args:
        name: Unique account name
        pin_code: Four-digit PIN code

    Returns:
        Created Account instance

    Raises:
        AccountAlreadyExistsError: If an account with this name exists
    """
    if Account.objects.filter(name=name).exists():
        logger.error("create_account(): account %r already exists", name)
        raise AccountAlreadyExistsError(f"Account {name} already exists")

    try:
        # Savepoint keeps the outer transaction usable after a unique violation
        with transaction.atomic():
            account = Account.objects.create(name=name, pin_code=pin_code, balance=0.0)
    except IntegrityError:
        logger.error("create_account(): account %r already exists", name)
        raise AccountAlreadyExistsError(f"Account {name} already exists")

    logger.info("Account %r created", name)
    return account
