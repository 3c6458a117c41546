"""
Management command to give accounts the demo transaction set.

Accounts that already have transactions are skipped.

Usage:
    python manage.py seed_demo_data --email someone@example.com
    python manage.py seed_demo_data --all
"""

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from apps.transactions.services import seed_demo_transactions

User = get_user_model()


class Command(BaseCommand):
    help = 'Seed the demo transaction set for accounts without transactions'

    def add_arguments(self, parser):
        parser.add_argument(
            '--email',
            help='Seed a single account',
        )
        parser.add_argument(
            '--all',
            action='store_true',
            help='Seed every active account that has no transactions',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show which accounts would be seeded without making changes',
        )

    def handle(self, *args, **options):
        if options['email']:
            users = User.objects.filter(email__iexact=options['email'])
            if not users.exists():
                raise CommandError(f"No user with email {options['email']}")
        elif options['all']:
            users = User.objects.filter(is_active=True)
        else:
            raise CommandError('Pass --email or --all')

        candidates = [u for u in users if not u.transactions.exists()]

        if not candidates:
            self.stdout.write(
                self.style.SUCCESS('Nothing to seed. Every selected account has transactions.')
            )
            return

        self.stdout.write(f'\nFound {len(candidates)} account(s) to seed:\n')
        for user in candidates:
            self.stdout.write(f'  - {user.email}')

        if options['dry_run']:
            self.stdout.write(
                self.style.WARNING('\n--dry-run mode: No changes made.')
            )
            return

        created = 0
        for user in candidates:
            created += len(seed_demo_transactions(user=user))

        self.stdout.write(
            self.style.SUCCESS(f'\nCreated {created} demo transaction(s).')
        )
