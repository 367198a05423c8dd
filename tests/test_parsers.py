"""Tests for CLI input parsers and the user resolver."""

from datetime import date, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from pennywise.domain.errors import NotFoundError
from pennywise.utils.amount_parser import parse_amount
from pennywise.utils.date_parser import parse_date
from pennywise.utils.user_resolver import resolve_user


def test_parse_absolute_date():
    assert parse_date("2024-01-15") == date(2024, 1, 15)
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_relative_dates():
    today = date(2024, 3, 1)
    assert parse_date("today", today=today) == today
    assert parse_date("Yesterday", today=today) == date(2024, 2, 29)
    assert parse_date("tomorrow", today=today) == date(2024, 3, 2)


def test_parse_today_defaults_to_current_date():
    assert parse_date("today") == date.today()
    assert parse_date("yesterday") == date.today() - timedelta(days=1)


@pytest.mark.parametrize("value", ["", "   ", "not a date"])
def test_parse_invalid_date(value):
    with pytest.raises(ValueError):
        parse_date(value)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("123.45", Decimal("123.45")),
        ("$123.45", Decimal("123.45")),
        ("R$1,234.56", Decimal("1234.56")),
        (" 10 ", Decimal("10")),
    ],
)
def test_parse_amount(value, expected):
    assert parse_amount(value) == expected


@pytest.mark.parametrize("value", ["", "abc", "-10", "(10.00)", "NaN"])
def test_parse_invalid_amount(value):
    with pytest.raises(ValueError):
        parse_amount(value)


class TestResolveUser:
    """Tests for resolving a user id or email."""

    def test_resolve_by_id(self, user_repository, sample_user):
        assert resolve_user(user_repository, str(sample_user.id)) == sample_user

    def test_resolve_by_email(self, user_repository, sample_user):
        assert resolve_user(user_repository, "Jane@Example.com") == sample_user

    def test_unknown_id(self, user_repository):
        user_id = uuid4()
        with pytest.raises(NotFoundError, match=f"User not found with id: {user_id}"):
            resolve_user(user_repository, str(user_id))

    @pytest.mark.parametrize("value", ["nobody@example.com", "not-an-email"])
    def test_unknown_email(self, user_repository, value):
        with pytest.raises(NotFoundError, match=f"User '{value}' not found"):
            resolve_user(user_repository, value)
