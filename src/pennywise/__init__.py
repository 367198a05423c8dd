"""pennywise - personal finance bookkeeping."""

__version__ = "0.1.0"
