import pytest
from io import StringIO
from django.core.management import call_command
from django.core.management.base import CommandError
from apps.transactions.services import DEMO_TRANSACTIONS


@pytest.mark.django_db
class TestSeedDemoDataCommand:

    def test_requires_target(self):
        with pytest.raises(CommandError):
            call_command('seed_demo_data')

    def test_unknown_email(self):
        with pytest.raises(CommandError):
            call_command('seed_demo_data', email='ghost@example.com')

    def test_seed_single_user(self, user):
        out = StringIO()
        call_command('seed_demo_data', email=user.email, stdout=out)

        assert user.transactions.count() == len(DEMO_TRANSACTIONS)
        assert f'Created {len(DEMO_TRANSACTIONS)} demo transaction(s).' in out.getvalue()

    def test_dry_run(self, user):
        out = StringIO()
        call_command('seed_demo_data', all=True, dry_run=True, stdout=out)

        assert user.transactions.count() == 0
        assert user.email in out.getvalue()

    def test_skips_users_with_transactions(self, user, make_transaction):
        make_transaction()
        out = StringIO()
        call_command('seed_demo_data', all=True, stdout=out)

        assert 'Nothing to seed' in out.getvalue()
