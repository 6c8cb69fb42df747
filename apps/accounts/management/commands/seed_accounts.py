"""
Management command to create sample accounts for trying out the API.

Usage:
    python manage.py seed_accounts
    python manage.py seed_accounts --clear
"""

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.accounts.models import Account


SAMPLE_ACCOUNTS = [
    # (name, pin_code, balance)
    ('Bob Marley', '1234', 100.0),
    ('Dart Vader', '1234', 200.0),
    ('Alice Cooper', '4321', 0.0),
]


class Command(BaseCommand):
    help = 'Create sample accounts for testing the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete all existing accounts before creating the samples',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            deleted, _ = Account.objects.all().delete()
            self.stdout.write(f'Deleted {deleted} account(s).')

        created = 0
        for name, pin_code, balance in SAMPLE_ACCOUNTS:
            _, was_created = Account.objects.get_or_create(
                name=name,
                defaults={'pin_code': pin_code, 'balance': balance},
            )
            if was_created:
                created += 1
                self.stdout.write(f'  + {name} (balance {balance})')
            else:
                self.stdout.write(f'  = {name} already exists, skipped')

        self.stdout.write(self.style.SUCCESS(f'{created} sample account(s) created.'))
