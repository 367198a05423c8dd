"""Utility functions for pennywise."""

from pennywise.utils.amount_parser import parse_amount
from pennywise.utils.date_parser import parse_date
from pennywise.utils.user_resolver import resolve_user

__all__ = ["parse_date", "parse_amount", "resolve_user"]
