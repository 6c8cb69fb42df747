import pytest
from rest_framework.test import APIClient
from apps.accounts.models import Account


@pytest.fixture
def api_client():
    """Return an API client."""
    return APIClient()


@pytest.fixture
def bob(db):
    """Create and return an account with a balance of 100."""
    return Account.objects.create(
        name='Bob Marley',
        pin_code='1234',
        balance=100.0,
    )


@pytest.fixture
def dart(db):
    """Create and return an account with a balance of 200."""
    return Account.objects.create(
        name='Dart Vader',
        pin_code='4321',
        balance=200.0,
    )


@pytest.fixture
def empty_account(db):
    """Create and return an account with a zero balance."""
    return Account.objects.create(
        name='Empty Pockets',
        pin_code='0000',
    )
