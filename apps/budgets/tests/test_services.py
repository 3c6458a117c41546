import pytest
from datetime import date
from decimal import Decimal
from apps.budgets.exceptions import BudgetNotFoundError
from apps.budgets.models import CategoryBudget
from apps.budgets.services import (
    DEFAULT_BUDGETS,
    get_budgets,
    set_budget,
    delete_budget,
    build_statement,
    generate_budgets,
)
from apps.budgets.services.statement import shift_month


@pytest.mark.django_db
class TestBudgetManagement:

    def test_defaults_stored_on_first_use(self, user):
        budgets = get_budgets(owner=user)

        assert budgets == dict(sorted(DEFAULT_BUDGETS.items()))
        assert CategoryBudget.objects.filter(owner=user).count() == 7

    def test_defaults_not_reapplied(self, user):
        get_budgets(owner=user)
        delete_budget(owner=user, category='Shopping')

        assert 'Shopping' not in get_budgets(owner=user)

    def test_set_budget_replaces_limit(self, user):
        set_budget(owner=user, category='Groceries', limit=Decimal('250.00'))

        budgets = get_budgets(owner=user)
        assert budgets['Groceries'] == Decimal('250.00')
        assert budgets['Transport'] == Decimal('200.00')

    def test_set_new_category(self, user):
        set_budget(owner=user, category='Pets', limit=Decimal('60.00'))

        assert get_budgets(owner=user)['Pets'] == Decimal('60.00')

    def test_delete_missing(self, user):
        with pytest.raises(BudgetNotFoundError):
            delete_budget(owner=user, category='Nothing')


class TestShiftMonth:

    @pytest.mark.parametrize('year, month, delta, expected', [
        (2023, 10, -1, '2023-09'),
        (2023, 10, 1, '2023-11'),
        (2023, 1, -1, '2022-12'),
        (2023, 12, 1, '2024-01'),
    ])
    def test_shift(self, year, month, delta, expected):
        assert shift_month(year, month, delta) == expected


@pytest.mark.django_db
class TestStatement:

    def test_statement_rows(self, user, sample_transactions, make_transaction):
        set_budget(owner=user, category='Groceries', limit=Decimal('100.00'))
        # Outside the month
        make_transaction(date=date(2023, 9, 30), amount=Decimal('500.00'), category='Groceries')

        statement = build_statement(owner=user, month='2023-10')
        rows = {row['category']: row for row in statement['categories']}

        assert statement['previous_month'] == '2023-09'
        assert statement['next_month'] == '2023-11'
        assert [row['category'] for row in statement['categories']] == sorted(rows)

        groceries = rows['Groceries']
        assert groceries['spent'] == Decimal('84.50')
        assert groceries['remaining'] == Decimal('15.50')
        assert groceries['percentage'] == 84.5
        assert groceries['status'] == 'warning'

        rent = rows['Rent/Mortgage']
        assert rent['percentage'] == 80.0
        assert rent['status'] == 'warning'

        food = rows['Food & Drink']
        assert food['status'] == 'ok'

        transport = rows['Transport']
        assert transport['spent'] == Decimal('0.00')
        assert transport['percentage'] == 0.0

    def test_income_is_not_spending(self, user, sample_transactions):
        statement = build_statement(owner=user, month='2023-10')

        assert 'Salary' not in [row['category'] for row in statement['categories']]

    def test_spending_without_budget(self, user, make_transaction):
        make_transaction(category='Pets', amount=Decimal('30.00'))

        statement = build_statement(owner=user, month='2023-10')
        pets = next(row for row in statement['categories'] if row['category'] == 'Pets')

        assert pets['budget'] == Decimal('0.00')
        assert pets['percentage'] == 100.0
        assert pets['status'] == 'over'

    def test_totals(self, user, sample_transactions):
        statement = build_statement(owner=user, month='2023-10')

        assert statement['total_budget'] == Decimal('3250.00')
        assert statement['total_spent'] == Decimal('1290.00')
        assert statement['total_remaining'] == Decimal('1960.00')
        assert statement['total_percentage'] == 39.7

    def test_zero_total_budget(self, user):
        for category in DEFAULT_BUDGETS:
            set_budget(owner=user, category=category, limit=Decimal('0'))

        assert build_statement(owner=user, month='2023-10')['total_percentage'] == 0.0


@pytest.mark.django_db
class TestGenerateBudgets:

    def test_merge_overwrites_and_keeps(self, user, fake_ai, sample_transactions):
        set_budget(owner=user, category='Pets', limit=Decimal('60.00'))
        fake_ai.json_reply = {'Groceries': 300, 'Savings': 500}

        result = generate_budgets(owner=user)

        assert result['generated'] == {'Groceries': Decimal('300.00'), 'Savings': Decimal('500.00')}
        assert result['budgets']['Groceries'] == Decimal('300.00')
        assert result['budgets']['Savings'] == Decimal('500.00')
        assert result['budgets']['Pets'] == Decimal('60.00')
        assert result['budgets']['Transport'] == Decimal('200.00')

    def test_fallback_merged(self, user, fake_ai):
        fake_ai.json_reply = 'not an object'

        result = generate_budgets(owner=user)

        assert result['generated'] == {'General': Decimal('1000')}
        assert result['budgets']['General'] == Decimal('1000.00')
