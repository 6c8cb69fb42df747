from django.core.validators import MinValueValidator, RegexValidator
from django.db import models


pin_code_validator = RegexValidator(
    regex=r'^[0-9]{4}$',
    message='Pin code must contain four digits',
)


class AccountQuerySet(models.QuerySet):
    """Lookups used by the account services."""

    def find_by_name(self, name):
        """Return the account with this exact name, or None."""
        return self.filter(name=name).first()


class Account(models.Model):
    """Named bank account guarded by a 4-digit PIN code."""

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255, unique=True)
    pin_code = models.CharField(max_length=4, validators=[pin_code_validator])
    balance = models.FloatField(default=0.0, validators=[MinValueValidator(0.0)])

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = AccountQuerySet.as_manager()

    class Meta:
        db_table = 'account'
        ordering = ['id']

    def __str__(self):
        return self.name

    def pin_matches(self, pin_code):
        return self.pin_code == pin_code
