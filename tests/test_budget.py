"""Tests for the Budget entity."""

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from pennywise.domain.entities import Budget
from pennywise.domain.errors import CurrencyMismatchError, ValidationError
from pennywise.domain.value_objects import DateRange, Money

JANUARY = DateRange(date(2024, 1, 1), date(2024, 1, 31))


@pytest.fixture
def budget():
    return Budget.create(uuid4(), "Food", Money("1000.00", "BRL"), JANUARY)


def test_create_budget(budget):
    assert budget.name == "Food"
    assert budget.amount == Money("1000", "BRL")
    assert budget.period == JANUARY
    assert budget.category_id is None


def test_nothing_spent_is_zero_percent(budget):
    assert budget.calculate_percentage_used(Money("0.00", "BRL")) == Decimal("0.00")
    assert budget.calculate_remaining(Money("0.00", "BRL")) == Decimal("1000.00")
    assert not budget.is_exceeded(Money("0.00", "BRL"))


def test_remaining_and_percentage(budget):
    spent = Money("250.00", "BRL")
    assert budget.calculate_remaining(spent) == Decimal("750.00")
    assert budget.calculate_percentage_used(spent) == Decimal("25.00")
    assert not budget.is_exceeded(spent)


def test_exactly_at_limit_is_not_exceeded(budget):
    spent = Money("1000.00", "BRL")
    assert budget.calculate_percentage_used(spent) == Decimal("100.00")
    assert not budget.is_exceeded(spent)


def test_over_budget(budget):
    spent = Money("1200.00", "BRL")
    assert budget.is_exceeded(spent)
    assert budget.calculate_remaining(spent) == Decimal("-200.00")
    assert budget.calculate_percentage_used(spent) == Decimal("120.00")


def test_percentage_rounds_half_up():
    budget = Budget.create(uuid4(), "Food", Money("3", "BRL"), JANUARY)
    # 1 / 3 = 33.333...
    assert budget.calculate_percentage_used(Money("1", "BRL")) == Decimal("33.33")
    # 0.02 / 3 * 100 = 0.666...
    assert budget.calculate_percentage_used(Money("0.02", "BRL")) == Decimal("0.67")


def test_spent_currency_must_match(budget):
    with pytest.raises(CurrencyMismatchError, match="Spent currency must match budget currency"):
        budget.is_exceeded(Money("1", "USD"))


def test_null_spent_rejected(budget):
    with pytest.raises(ValidationError, match="Spent amount cannot be null"):
        budget.calculate_remaining(None)


def test_is_active_uses_inclusive_period(budget):
    assert budget.is_active(date(2024, 1, 1))
    assert budget.is_active(date(2024, 1, 31))
    assert not budget.is_active(date(2024, 2, 1))


def test_amount_must_be_positive():
    with pytest.raises(ValidationError, match="Budget amount must be greater than zero"):
        Budget.create(uuid4(), "Food", Money.zero("BRL"), JANUARY)


def test_period_required():
    with pytest.raises(ValidationError, match="Budget period cannot be null"):
        Budget.create(uuid4(), "Food", Money("10", "BRL"), None)


def test_blank_name_rejected():
    with pytest.raises(ValidationError, match="Budget name cannot be empty"):
        Budget.create(uuid4(), "  ", Money("10", "BRL"), JANUARY)


def test_mutators(budget):
    category_id = uuid4()
    budget.update_name("Groceries")
    budget.update_amount(Money("500", "BRL"))
    budget.assign_category(category_id)

    assert budget.name == "Groceries"
    assert budget.amount == Money("500", "BRL")
    assert budget.category_id == category_id

    with pytest.raises(ValidationError):
        budget.update_amount(Money.zero("BRL"))
    assert budget.amount == Money("500", "BRL")
