"""
Component Type Helpers

This module resolves and enforces the numeric component type used by the
Vector2 family. Every component is stored as a numpy scalar of exactly the
vector's dtype, so integer vectors wrap at their width and float vectors keep
their precision.

**Key Operations**:
- Resolve a component type (numpy scalar type, builtin, or dtype string)
- Explicit lossy casts for construction (truncation, wraparound)
- Strict coercion for scalar operands (no float into an integer vector)
- Truncating integer division and C-style remainder
"""

import math
import numbers

import numpy as np

# Scope for all component arithmetic: overflow wraps, IEEE results stay values
SILENT_ERRSTATE = dict(over="ignore", divide="ignore", invalid="ignore", under="ignore")


def resolve_component_type(component_type) -> np.dtype:
    """
    Turn a component type into a numpy dtype.

    Accepts numpy scalar types (np.int16, np.float32, ...), builtin int/float
    and dtype strings. Anything that is not an integer or floating type
    (bool, complex, str, object) is rejected.

    Raises:
        TypeError: component_type is not an integer or floating type
    """
    if component_type is None:
        raise TypeError("Vector2 component type cannot be None")
    try:
        dtype = np.dtype(component_type)
    except TypeError as e:
        raise TypeError(f"{component_type!r} is not a numeric component type") from e
    if not (np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating)):
        raise TypeError(f"{dtype.name} is not a numeric component type (integer or floating required)")
    return dtype


def is_integer_type(dtype: np.dtype) -> bool:
    return np.issubdtype(dtype, np.integer)


def _check_real(value):
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise TypeError(f"Vector2 components must be real numbers, got {type(value).__name__}")


def cast(value, dtype: np.dtype):
    """
    Explicitly convert a real number to a scalar of dtype.

    Follows numpy's C casting: float to integer truncates toward zero,
    integer narrowing wraps. Never warns.
    """
    _check_real(value)
    if isinstance(value, numbers.Integral):
        # Reduce in Python ints so values wider than 64 bits still wrap
        if is_integer_type(dtype):
            bits = dtype.itemsize * 8
            wrapped = int(value) % (1 << bits)
            if np.issubdtype(dtype, np.signedinteger) and wrapped >= 1 << (bits - 1):
                wrapped -= 1 << bits
            return dtype.type(wrapped)
        try:
            value = float(value)
        except OverflowError:
            value = math.inf if value > 0 else -math.inf
    with np.errstate(**SILENT_ERRSTATE):
        return np.asarray(value).astype(dtype, casting="unsafe")[()]


def coerce_scalar(value, dtype: np.dtype):
    """
    Convert a scalar operand to dtype without changing its kind.

    Integers are accepted by any vector; floats only by floating vectors.
    Integer operands must fit the component type; only the explicit
    constructors wrap.

    Raises:
        TypeError: value is not a real number, or is a float for an integer dtype
        OverflowError: value is an integer outside the range of an integer dtype
    """
    _check_real(value)
    if is_integer_type(dtype):
        if not isinstance(value, numbers.Integral):
            raise TypeError(f"cannot use {type(value).__name__} operand with {dtype.name} components")
        limits = np.iinfo(dtype)
        if not limits.min <= int(value) <= limits.max:
            raise OverflowError(f"{value} does not fit {dtype.name} components")
    return cast(value, dtype)


def truncating_divide(lhs, rhs):
    """Integer quotient rounded toward zero."""
    if rhs == 0:
        raise ZeroDivisionError("integer division by zero")
    with np.errstate(**SILENT_ERRSTATE):
        remainder = np.fmod(lhs, rhs)
        return (lhs - remainder) // rhs


def truncating_modulo(lhs, rhs):
    """Integer remainder with the sign of the dividend."""
    if rhs == 0:
        raise ZeroDivisionError("integer modulo by zero")
    with np.errstate(**SILENT_ERRSTATE):
        return np.fmod(lhs, rhs)
