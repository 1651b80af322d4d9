"""Binding configuration."""

from sqlbind.exceptions import ImproperConfigurationError

__all__ = ("BindingConfig",)


class BindingConfig:
    """Declarative configuration for how named parameters are bound."""

    __slots__ = ("expand_iterables", "log_statements", "pad_optimised_lists")

    def __init__(
        self, pad_optimised_lists: bool = True, expand_iterables: bool = True, log_statements: bool = False
    ) -> None:
        """Initialize binding configuration.

        Args:
            pad_optimised_lists: Pad ``@name`` list expansions to a power-of-two length
            expand_iterables: Expand iterable values into one placeholder per element
            log_statements: Log the humanized statement of every successful bind at DEBUG level

        Raises:
            ImproperConfigurationError: If an option is not a boolean
        """
        for option, value in (
            ("pad_optimised_lists", pad_optimised_lists),
            ("expand_iterables", expand_iterables),
            ("log_statements", log_statements),
        ):
            if not isinstance(value, bool):
                msg = f"BindingConfig option {option!r} must be a bool, got {type(value).__name__}"
                raise ImproperConfigurationError(msg)

        self.pad_optimised_lists = pad_optimised_lists
        self.expand_iterables = expand_iterables
        self.log_statements = log_statements

    def hash(self) -> int:
        """Generate a deterministic hash of the options."""
        return hash((self.pad_optimised_lists, self.expand_iterables, self.log_statements))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        return (self.pad_optimised_lists, self.expand_iterables, self.log_statements) == (
            other.pad_optimised_lists,
            other.expand_iterables,
            other.log_statements,
        )

    def __hash__(self) -> int:
        return self.hash()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(pad_optimised_lists={self.pad_optimised_lists!r}, "
            f"expand_iterables={self.expand_iterables!r}, log_statements={self.log_statements!r})"
        )
