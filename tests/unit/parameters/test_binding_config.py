"""Unit tests for sqlbind.parameters.config."""

import pytest

from sqlbind.exceptions import ImproperConfigurationError
from sqlbind.parameters.config import BindingConfig


def test_binding_config_defaults() -> None:
    config = BindingConfig()
    assert config.pad_optimised_lists is True
    assert config.expand_iterables is True
    assert config.log_statements is False


def test_binding_config_equality_and_hash() -> None:
    assert BindingConfig() == BindingConfig()
    assert BindingConfig(log_statements=True) != BindingConfig()
    assert BindingConfig().hash() == BindingConfig().hash()
    assert BindingConfig(pad_optimised_lists=False).hash() != BindingConfig().hash()


def test_binding_config_rejects_non_bool() -> None:
    with pytest.raises(ImproperConfigurationError, match="pad_optimised_lists"):
        BindingConfig(pad_optimised_lists="yes")  # type: ignore[arg-type]


def test_binding_config_repr() -> None:
    assert repr(BindingConfig()) == (
        "BindingConfig(pad_optimised_lists=True, expand_iterables=True, log_statements=False)"
    )
