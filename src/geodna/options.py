"""
Options shared by the encoding, decoding and search operations.

Options are resolved once at the API boundary. Keyword arguments passed
directly to an operation take priority over an explicit Options record.
"""

from dataclasses import dataclass, replace
from typing import Optional


DEFAULT_PRECISION = 22
"""Default code length produced by encode()."""

DEFAULT_SEARCH_PRECISION = 12
"""Default code length of the cells returned by a radius search."""


@dataclass(frozen=True)
class Options:
    """Precision and angle unit for an operation."""

    precision: Optional[int] = None
    """Code length including the hemisphere marker (None = operation default)."""

    radians: bool = False
    """Coordinates are given (or returned) in radians instead of degrees."""

    def __post_init__(self):
        if self.precision is not None and (
            isinstance(self.precision, bool) or not isinstance(self.precision, int)
        ):
            raise TypeError("precision must be an int or None")
        if not isinstance(self.radians, bool):
            raise TypeError("radians must be a bool")

    def precision_or(self, default: int) -> int:
        """Return the configured precision, or default when unset."""
        if self.precision is None:
            return default
        return self.precision


def resolve_options(
    options: Optional[Options] = None,
    precision: Optional[int] = None,
    radians: Optional[bool] = None,
) -> Options:
    """
    Merge keyword overrides into an Options record.

    Args:
        options: Base options (defaults when None)
        precision: Overrides options.precision when given
        radians: Overrides options.radians when given

    Returns:
        A new Options instance
    """
    resolved = options or Options()
    if precision is not None:
        resolved = replace(resolved, precision=precision)
    if radians is not None:
        resolved = replace(resolved, radians=radians)
    return resolved
