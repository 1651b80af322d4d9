"""Parameter processing for sqlbind.

Tokenizes statements, binds indexed and named values to them, and renders
humanized statements for logging.
"""

from sqlbind.parameters.binder import ParameterBinder, bind, humanize, resolve_parameter_source
from sqlbind.parameters.config import BindingConfig
from sqlbind.parameters.humanize import humanize_value
from sqlbind.parameters.tokenizer import count_indexed, parameter_names, render, tokenize
from sqlbind.parameters.types import BoundQuery, IndexedParameters, NamedParameters, Token, TokenType
from sqlbind.parameters.utils import intersperse, next_power_of_two_or_zero, pad_with_last

__all__ = (
    "BindingConfig",
    "BoundQuery",
    "IndexedParameters",
    "NamedParameters",
    "ParameterBinder",
    "Token",
    "TokenType",
    "bind",
    "count_indexed",
    "humanize",
    "humanize_value",
    "intersperse",
    "next_power_of_two_or_zero",
    "pad_with_last",
    "parameter_names",
    "render",
    "resolve_parameter_source",
    "tokenize",
)
