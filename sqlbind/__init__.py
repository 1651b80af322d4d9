"""sqlbind: named, indexed and list parameters for any DB-API driver."""

from sqlbind import exceptions, parameters, typing, utils
from sqlbind.__metadata__ import __version__
from sqlbind.exceptions import (
    MismatchedParameterCountError,
    MixedParameterStyleError,
    ParameterError,
    SQLBindError,
    UnspecifiedParameterError,
)
from sqlbind.parameters import (
    BindingConfig,
    BoundQuery,
    IndexedParameters,
    NamedParameters,
    ParameterBinder,
    Token,
    TokenType,
    bind,
    humanize,
    humanize_value,
    tokenize,
)
from sqlbind.query import IndexedParamQuery, NamedParamQuery, NoParamQuery, ParamQuery, create_query

__all__ = (
    "BindingConfig",
    "BoundQuery",
    "IndexedParamQuery",
    "IndexedParameters",
    "MismatchedParameterCountError",
    "MixedParameterStyleError",
    "NamedParamQuery",
    "NamedParameters",
    "NoParamQuery",
    "ParamQuery",
    "ParameterBinder",
    "ParameterError",
    "SQLBindError",
    "Token",
    "TokenType",
    "UnspecifiedParameterError",
    "__version__",
    "bind",
    "create_query",
    "exceptions",
    "humanize",
    "humanize_value",
    "parameters",
    "tokenize",
    "typing",
    "utils",
)
