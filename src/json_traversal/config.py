"""TraversalConfig: construction-time options for TraversalNode.

TraversalConfig is a frozen (immutable) dataclass.  It governs how raw values
are classified while a node tree is being built; it never affects visitor
dispatch or node equality.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_CONFIG", "TraversalConfig"]


@dataclass(frozen=True, slots=True)
class TraversalConfig:
    """Immutable options for building TraversalNode trees.

    Attributes:
        max_depth: Maximum location depth (number of path segments) a node may
            have.  ``None`` disables the check.  A depth of 0 admits only the
            root value.
        allow_non_finite: When False, NaN and +/-Infinity are rejected with
            ``UnsupportedValueKindError`` (strict JSON has no literal for them).
            Default True, matching ``json.loads``.
        integral_floats_as_integers: When True, a float or Decimal that is
            mathematically an integer (``3.0``) is stored as ``int`` and
            dispatched to ``visit_integer``.  Default True.
    """

    max_depth: int | None = None
    allow_non_finite: bool = True
    integral_floats_as_integers: bool = True

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            msg = f"max_depth must be >= 0, got {self.max_depth}"
            raise ValueError(msg)


DEFAULT_CONFIG = TraversalConfig()
