"""classify(): the total mapping from raw Python values to NodeKind.

Checks run in a fixed order; the first match wins:

1. ``None`` / ``NULL``            -> NULL
2. ``bool``                       -> BOOLEAN
3. non-text sequences             -> ARRAY
4. mappings with ``str`` keys     -> OBJECT
5. ``str``                        -> STRING
6. real numbers, ``Decimal``      -> NUMBER
7. anything else                  -> UnsupportedValueKindError

numpy scalars and arrays are unwrapped to native Python values first, so
documents assembled from numeric pipelines classify the same way as those
produced by ``json.loads``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from decimal import Decimal
from logging import getLogger
from numbers import Rational, Real
from typing import TYPE_CHECKING, Any

import numpy as np

from json_traversal.errors import UnsupportedValueKindError
from json_traversal.tree.kinds import JsonNull, NodeKind

if TYPE_CHECKING:
    from json_traversal.config import TraversalConfig
    from json_traversal.tree.path import PathContext

__all__ = ["classify"]

logger = getLogger(__name__)

# Sequences that are really text or binary data, never JSON arrays
_NOT_ARRAYS = (str, bytes, bytearray, memoryview)

_DECIMAL_NAN = Decimal("NaN")


def classify(
    value: Any, location: PathContext, config: TraversalConfig
) -> tuple[NodeKind, Any]:
    """Classify ``value`` and return it alongside its normalized form.

    Normalization:
        NULL:    always ``None``.
        BOOLEAN: a native ``bool``.
        ARRAY:   a ``list`` of raw child values, in order.
        OBJECT:  the input mapping (all keys verified to be ``str``).
        NUMBER:  ``int`` when the value is integral (see
                 ``TraversalConfig.integral_floats_as_integers``), otherwise
                 the ``float`` or ``Decimal`` unchanged.  A ``Fraction`` with
                 denominator 1 becomes ``int``; any other ``numbers.Real``
                 becomes ``float``.

    Args:
        value:    Raw document value.
        location: Where ``value`` sits in the document (used in errors only).
        config:   Classification options.

    Returns:
        ``(kind, normalized_value)``.

    Raises:
        UnsupportedValueKindError: If ``value`` is not a JSON-like value.
    """
    if isinstance(value, np.ndarray):
        value = value.tolist()
    elif isinstance(value, np.generic):
        value = value.item()

    if value is None or isinstance(value, JsonNull):
        return NodeKind.NULL, None

    # bool MUST be checked before the numeric branch -- bool subclasses int
    if isinstance(value, bool):
        return NodeKind.BOOLEAN, value

    if isinstance(value, Sequence) and not isinstance(value, _NOT_ARRAYS):
        return NodeKind.ARRAY, list(value)

    if isinstance(value, Mapping):
        for key in value:
            if not isinstance(key, str):
                logger.debug(f"Rejecting non-string object key {key!r} at {location}")
                raise UnsupportedValueKindError(
                    value, location, f"object key {key!r} is not a string"
                )
        return NodeKind.OBJECT, value

    if isinstance(value, str):
        return NodeKind.STRING, value

    if isinstance(value, (Real, Decimal)):
        return NodeKind.NUMBER, _normalize_number(value, location, config)

    logger.debug(f"Rejecting value of type {type(value).__name__} at {location}")
    raise UnsupportedValueKindError(value, location)


def _normalize_number(
    value: Real | Decimal,
    location: PathContext,
    config: TraversalConfig,
) -> int | float | Decimal:
    """Return the lossless native form of a numeric value.

    NaN is returned as one shared object per type (``math.nan`` or
    ``_DECIMAL_NAN``), so nodes built from equal documents compare equal even
    when they hold NaN.  Negative zero is never turned into ``int`` because
    that would drop its sign.
    """
    if isinstance(value, (int, np.integer)):
        return int(value)

    if isinstance(value, Decimal):
        if value.is_nan():
            return _non_finite(_DECIMAL_NAN, location, config)
        if value.is_infinite():
            return _non_finite(value, location, config)
        if (
            config.integral_floats_as_integers
            and value == value.to_integral_value()
            and not _is_negative_zero(value)
        ):
            return int(value)
        return value

    if isinstance(value, Rational) and value.denominator == 1:
        return int(value.numerator)

    # np.longdouble survives .item(); read it exactly, not through a C double
    if isinstance(value, np.floating) and np.isfinite(value):
        if config.integral_floats_as_integers and not _is_negative_zero(value):
            numerator, denominator = value.as_integer_ratio()
            if denominator == 1:
                return numerator
        return float(value)

    number = float(value)
    if math.isnan(number):
        return _non_finite(math.nan, location, config)
    if math.isinf(number):
        return _non_finite(number, location, config)
    if (
        config.integral_floats_as_integers
        and number.is_integer()
        and not _is_negative_zero(number)
    ):
        return int(number)
    return number


def _is_negative_zero(value: Real | Decimal) -> bool:
    return value == 0 and math.copysign(1.0, float(value)) < 0


def _non_finite(
    value: float | Decimal, location: PathContext, config: TraversalConfig
) -> float | Decimal:
    if not config.allow_non_finite:
        logger.debug(f"Rejecting non-finite number {value!r} at {location}")
        raise UnsupportedValueKindError(value, location, "non-finite number")
    return value
