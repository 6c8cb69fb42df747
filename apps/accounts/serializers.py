import math
import re

from rest_framework import serializers

from .models import Account


PIN_CODE_PATTERN = re.compile(r'^[0-9]{4}$')

NAME_EMPTY_MESSAGE = 'Field name can`t be empty'
NAMES_EMPTY_MESSAGE = 'Name fields can`t be empty'
PIN_CODE_MESSAGE = 'Pin code must contain four digits'


def _validate_pin_code(value):
    if not PIN_CODE_PATTERN.match(value):
        raise serializers.ValidationError(PIN_CODE_MESSAGE)
    return value


def _validate_positive(value, message):
    if not math.isfinite(value):
        raise serializers.ValidationError('A finite number is required.')
    if value <= 0:
        raise serializers.ValidationError(message)
    return value


# =============================================================================
# Input Serializers
# =============================================================================

class CreateAccountInputSerializer(serializers.Serializer):
    """
    Validate input for opening an account.

    Fields:
        name (str): Account name, must not be blank
        pin_code (str): Exactly four digits
    """

    name = serializers.CharField(
        max_length=255,
        error_messages={'blank': NAME_EMPTY_MESSAGE},
    )
    pin_code = serializers.CharField(
        error_messages={'blank': PIN_CODE_MESSAGE},
    )

    def validate_pin_code(self, value):
        return _validate_pin_code(value)


class DepositInputSerializer(serializers.Serializer):
    """
    Validate input for deposits and withdrawals.

    The sum travels as ``deposit`` on the wire for both operations.
    """

    name = serializers.CharField(error_messages={'blank': NAME_EMPTY_MESSAGE})
    pin_code = serializers.CharField(error_messages={'blank': PIN_CODE_MESSAGE})
    deposit = serializers.FloatField(source='amount')

    def validate_pin_code(self, value):
        return _validate_pin_code(value)

    def validate_deposit(self, value):
        return _validate_positive(value, 'The deposit must have a positive balance')


class TransferInputSerializer(serializers.Serializer):
    """Validate input for a transfer between two accounts."""

    nameFrom = serializers.CharField(
        source='name_from',
        error_messages={'blank': NAMES_EMPTY_MESSAGE},
    )
    nameTo = serializers.CharField(
        source='name_to',
        error_messages={'blank': NAMES_EMPTY_MESSAGE},
    )
    pin_code = serializers.CharField(error_messages={'blank': PIN_CODE_MESSAGE})
    remittance = serializers.FloatField(source='amount')

    def validate_pin_code(self, value):
        return _validate_pin_code(value)

    def validate_remittance(self, value):
        return _validate_positive(value, 'The remittance must have a positive balance')


# =============================================================================
# Output Serializers
# =============================================================================

class AccountSerializer(serializers.ModelSerializer):
    """Public view of an account: name and balance, never the PIN code."""

    class Meta:
        model = Account
        fields = ['name', 'balance']
        read_only_fields = fields


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
