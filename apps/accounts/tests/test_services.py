"""
Service layer unit tests for accounts app.

Tests cover:
- Balance changes persisted by each operation
- Business rule validation
- Transaction rollback on failure
"""

import pytest
from unittest.mock import patch

from apps.accounts.models import Account
from apps.accounts.services import (
    get_accounts,
    create_account,
    make_deposit,
    withdraw,
    transfer,
)
from apps.accounts.services.exceptions import (
    AccountNotFoundError,
    AccountAlreadyExistsError,
    BalanceOverflowError,
    InvalidPinCodeError,
    InsufficientFundsError,
    SameAccountTransferError,
)


# =============================================================================
# Account Management Service Tests
# =============================================================================

@pytest.mark.django_db
class TestAccountManagement:
    """Tests for account_management.py service functions."""

    def test_get_accounts_returns_all(self, bob, dart):
        accounts = get_accounts()

        assert [a.name for a in accounts] == ['Bob Marley', 'Dart Vader']

    def test_get_accounts_empty(self):
        assert get_accounts() == []

    def test_create_account_starts_with_zero_balance(self):
        account = create_account(name='Oleg', pin_code='1111')

        assert account.pk is not None
        assert account.balance == 0.0
        assert Account.objects.get(name='Oleg').pin_code == '1111'

    def test_create_account_duplicate_name(self, bob):
        with pytest.raises(AccountAlreadyExistsError):
            create_account(name=bob.name, pin_code='9999')

        assert Account.objects.filter(name=bob.name).count() == 1


# =============================================================================
# Deposit / Withdraw Service Tests
# =============================================================================

@pytest.mark.django_db
class TestDeposit:
    """Tests for make_deposit()."""

    def test_deposit_increases_balance(self, bob):
        account = make_deposit(name=bob.name, pin_code='1234', amount=30.0)

        assert account.balance == 130.0
        bob.refresh_from_db()
        assert bob.balance == 130.0

    def test_deposit_unknown_account(self, db):
        with pytest.raises(AccountNotFoundError):
            make_deposit(name='Nobody', pin_code='1234', amount=30.0)

    def test_deposit_wrong_pin_code(self, bob):
        with pytest.raises(InvalidPinCodeError):
            make_deposit(name=bob.name, pin_code='0000', amount=30.0)

        bob.refresh_from_db()
        assert bob.balance == 100.0

    def test_deposit_overflowing_balance(self, bob):
        """A finite deposit that would make the balance infinite is rejected."""
        Account.objects.filter(pk=bob.pk).update(balance=1e308)

        with pytest.raises(BalanceOverflowError):
            make_deposit(name=bob.name, pin_code='1234', amount=1e308)

        bob.refresh_from_db()
        assert bob.balance == 1e308


@pytest.mark.django_db
class TestWithdraw:
    """Tests for withdraw()."""

    def test_withdraw_decreases_balance(self, bob):
        account = withdraw(name=bob.name, pin_code='1234', amount=30.0)

        assert account.balance == 70.0
        bob.refresh_from_db()
        assert bob.balance == 70.0

    def test_withdraw_whole_balance(self, bob):
        account = withdraw(name=bob.name, pin_code='1234', amount=100.0)

        assert account.balance == 0.0

    def test_withdraw_more_than_balance(self, bob):
        with pytest.raises(InsufficientFundsError):
            withdraw(name=bob.name, pin_code='1234', amount=100.5)

        bob.refresh_from_db()
        assert bob.balance == 100.0

    def test_withdraw_wrong_pin_code(self, bob):
        with pytest.raises(InvalidPinCodeError):
            withdraw(name=bob.name, pin_code='4321', amount=10.0)

    def test_withdraw_unknown_account(self, db):
        with pytest.raises(AccountNotFoundError):
            withdraw(name='Nobody', pin_code='1234', amount=10.0)


# =============================================================================
# Transfer Service Tests
# =============================================================================

@pytest.mark.django_db
class TestTransfer:
    """Tests for transfer()."""

    def test_transfer_moves_money(self, bob, dart):
        sender = transfer(name_from=bob.name, name_to=dart.name, pin_code='1234', amount=30.0)

        assert sender.name == bob.name
        assert sender.balance == 70.0
        bob.refresh_from_db()
        dart.refresh_from_db()
        assert bob.balance == 70.0
        assert dart.balance == 230.0

    def test_transfer_checks_sender_pin_only(self, bob, dart):
        # dart's own pin code does not authorize spending bob's money
        with pytest.raises(InvalidPinCodeError):
            transfer(name_from=bob.name, name_to=dart.name, pin_code='4321', amount=30.0)

    def test_transfer_insufficient_funds(self, bob, dart):
        with pytest.raises(InsufficientFundsError):
            transfer(name_from=bob.name, name_to=dart.name, pin_code='1234', amount=150.0)

        bob.refresh_from_db()
        dart.refresh_from_db()
        assert bob.balance == 100.0
        assert dart.balance == 200.0

    def test_transfer_unknown_sender(self, dart):
        with pytest.raises(AccountNotFoundError):
            transfer(name_from='Nobody', name_to=dart.name, pin_code='1234', amount=10.0)

    def test_transfer_unknown_recipient(self, bob):
        with pytest.raises(AccountNotFoundError):
            transfer(name_from=bob.name, name_to='Nobody', pin_code='1234', amount=10.0)

        bob.refresh_from_db()
        assert bob.balance == 100.0

    def test_transfer_to_same_account(self, bob):
        with pytest.raises(SameAccountTransferError):
            transfer(name_from=bob.name, name_to=bob.name, pin_code='1234', amount=10.0)

        bob.refresh_from_db()
        assert bob.balance == 100.0

    def test_transfer_overflowing_recipient_balance(self, bob, dart):
        Account.objects.filter(pk=bob.pk).update(balance=1e308)
        Account.objects.filter(pk=dart.pk).update(balance=1e308)

        with pytest.raises(BalanceOverflowError):
            transfer(name_from=bob.name, name_to=dart.name, pin_code='1234', amount=1e308)

        bob.refresh_from_db()
        dart.refresh_from_db()
        assert bob.balance == 1e308
        assert dart.balance == 1e308

    @pytest.mark.django_db(transaction=True)
    def test_transfer_rolls_back_when_second_save_fails(self, bob, dart):
        """Sender debit is undone if crediting the recipient fails."""
        original_save = Account.save

        def failing_save(self, *args, **kwargs):
            if self.name == 'Dart Vader':
                raise RuntimeError("disk full")
            return original_save(self, *args, **kwargs)

        with patch.object(Account, 'save', failing_save):
            with pytest.raises(RuntimeError):
                transfer(name_from=bob.name, name_to=dart.name, pin_code='1234', amount=30.0)

        bob.refresh_from_db()
        dart.refresh_from_db()
        assert bob.balance == 100.0
        assert dart.balance == 200.0
