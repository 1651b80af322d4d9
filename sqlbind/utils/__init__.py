"""Utility functions and classes for sqlbind."""

from sqlbind.utils import logging, type_guards

__all__ = ("logging", "type_guards")
