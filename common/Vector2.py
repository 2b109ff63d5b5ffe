"""
Generic 2D Vector Mathematics

This module provides the Vector2 value type used for positions, directions and
velocities across the framework. A vector is parameterized by its numeric
component type, so the same operation set serves integer grids (Vector2s,
Vector2b) and float physics (Vector2f).

**Key Operations**:
- Construction and explicit cross-type conversion (truncating, wrapping casts)
- Arithmetic with a closed operation set (Op), in place or into a new vector
- Geometry: length, angle, distance (diff), scalar product, normalization
- Mutators and snapshots: set, move, negate, as_array

**Component Types**:
```python
Vector2f = Vector2[np.float32]      # physics positions/velocities
grid = Vector2[np.int16](3, 4)      # any integer or floating numpy type
Vector2[str]                        # TypeError, rejected before use
```

**Usage**: Held by bodies and renderers as position/velocity values. Geometry
queries always return Python floats regardless of the component type.
"""

import math
import numbers
from enum import Enum
from typing import Dict, Iterator, Tuple

import numpy as np

from common.numeric import (
    SILENT_ERRSTATE,
    cast,
    coerce_scalar,
    is_integer_type,
    resolve_component_type,
    truncating_divide,
    truncating_modulo,
)


class Op(Enum):
    """Closed set of arithmetic operations supported by Vector2."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MODULO = "%"


_FLOAT_OPERATIONS = {
    Op.ADD: np.add,
    Op.SUBTRACT: np.subtract,
    Op.MULTIPLY: np.multiply,
    Op.DIVIDE: np.true_divide,
    Op.MODULO: np.fmod,
}

_INTEGER_OPERATIONS = {
    **_FLOAT_OPERATIONS,
    Op.DIVIDE: truncating_divide,
    Op.MODULO: truncating_modulo,
}


class Vector2:
    """
    2D vector with components of a fixed numeric type.

    **Purpose**: Numeric pair with arithmetic and a small geometry toolkit

    **Key Features**:
    1. **Typed Components**: x and y are always numpy scalars of `dtype`
    2. **Arithmetic**: `+ - * / %` and their in-place forms, vector or scalar operand
    3. **Geometry**: length, angle, diff, scalar product, normalize
    4. **Value Semantics**: copy() gives an independent vector; equality is exact

    **Operand Rules**:
    - Vector operands must share the component type (no implicit conversion)
    - Integer vectors reject float scalars; float vectors accept ints
    - Integer division truncates toward zero, remainder keeps the dividend's sign
    - Integer division by a zero component raises ZeroDivisionError
    - Float division by zero gives inf/nan (IEEE), never an exception

    **Common Usage Patterns**:
    - Positions: Vector2f(body.position)
    - Directions: (target - position).normalize()
    - Distances: position.diff(target)
    - Cross-type copies: Vector2f(Vector2s(3, 4))

    Equality is exact. Float callers that need a tolerance compare
    `a.diff(b) < eps` themselves.
    """
    __slots__ = ("_x", "_y")

    # numpy defers binary operators to Vector2 instead of broadcasting over it
    __array_ufunc__ = None
    __hash__ = None

    dtype: np.dtype = np.dtype(np.float64)
    _specializations: Dict[np.dtype, type] = {}

    def __class_getitem__(cls, component_type) -> type:
        """Return the Vector2 subclass whose components are of component_type."""
        if cls is not Vector2:
            raise TypeError(f"{cls.__name__} already has component type {cls.dtype.name}")
        dtype = resolve_component_type(component_type)
        specialized = Vector2._specializations.get(dtype)
        if specialized is None:
            name = f"Vector2[{dtype.name}]"
            specialized = type(name, (Vector2,), {
                "__slots__": (),
                "__module__": __name__,
                "__qualname__": name,
                "dtype": dtype,
            })
            Vector2._specializations[dtype] = specialized
        return specialized

    def __init__(self, x=None, y=None):
        """
        Create a vector.

        Forms:
            Vector2f()                  -> (0, 0)
            Vector2f(x, y)              -> components cast to the component type
            Vector2f((x, y))            -> any 2-element sequence (tuple, list, ndarray, Vec2d)
            Vector2f(other_vector)      -> cross-type copy

        Casting truncates floats toward zero and wraps integers that do not
        fit (Vector2b(300, 0).x == 44).

        Raises:
            TypeError: a component is not a real number
            ValueError: a sequence does not hold exactly two elements
        """
        if x is None and y is None:
            x, y = 0, 0
        elif y is None:
            x, y = self._unpack(x)
        elif x is None:
            raise TypeError("Vector2 needs an x component when y is given")
        self._x = cast(x, self.dtype)
        self._y = cast(y, self.dtype)

    @staticmethod
    def _unpack(source) -> Tuple:
        if isinstance(source, Vector2):
            return source._x, source._y
        if isinstance(source, numbers.Number):
            raise TypeError("expected a Vector2, a 2-element sequence, or both x and y")
        try:
            size = len(source)
        except TypeError as e:
            raise TypeError(f"cannot build a Vector2 from {type(source).__name__}") from e
        if size != 2:
            raise ValueError(f"Vector2 needs exactly 2 elements, got {size}")
        return source[0], source[1]

    @classmethod
    def _wrap(cls, x, y) -> "Vector2":
        # x and y are already scalars of cls.dtype
        vector = cls.__new__(cls)
        vector._x = x
        vector._y = y
        return vector

    # Components

    @property
    def x(self):
        return self._x

    @x.setter
    def x(self, value):
        self._x = coerce_scalar(value, self.dtype)

    @property
    def y(self):
        return self._y

    @y.setter
    def y(self, value):
        self._y = coerce_scalar(value, self.dtype)

    # Arithmetic

    def _compute(self, op: Op, lhs, rhs):
        operations = _INTEGER_OPERATIONS if is_integer_type(self.dtype) else _FLOAT_OPERATIONS
        with np.errstate(**SILENT_ERRSTATE):
            return cast(operations[op](lhs, rhs), self.dtype)

    def _operand(self, operand) -> Tuple:
        if isinstance(operand, Vector2):
            if operand.dtype != self.dtype:
                raise TypeError(
                    f"cannot combine {type(self).__name__} with {type(operand).__name__}; "
                    f"convert explicitly first"
                )
            return operand._x, operand._y
        scalar = coerce_scalar(operand, self.dtype)
        return scalar, scalar

    def apply_in_place(self, op: Op, operand) -> "Vector2":
        """
        Apply op component-wise with operand (vector or scalar), mutating self.

        Returns self for chaining. On ZeroDivisionError self is left untouched.
        """
        if not isinstance(op, Op):
            raise TypeError(f"unsupported operation {op!r}, expected an Op member")
        other_x, other_y = self._operand(operand)
        x = self._compute(op, self._x, other_x)
        y = self._compute(op, self._y, other_y)
        self._x, self._y = x, y
        return self

    def combine(self, op: Op, operand) -> "Vector2":
        """Return `self op operand` as a new vector; neither side is modified."""
        return self.copy().apply_in_place(op, operand)

    def _reflected(self, op: Op, number) -> "Vector2":
        scalar = coerce_scalar(number, self.dtype)
        return self._wrap(self._compute(op, scalar, self._x), self._compute(op, scalar, self._y))

    def __iadd__(self, other):
        return self.apply_in_place(Op.ADD, other)

    def __isub__(self, other):
        return self.apply_in_place(Op.SUBTRACT, other)

    def __imul__(self, other):
        return self.apply_in_place(Op.MULTIPLY, other)

    def __itruediv__(self, other):
        return self.apply_in_place(Op.DIVIDE, other)

    def __imod__(self, other):
        return self.apply_in_place(Op.MODULO, other)

    def __add__(self, other):
        return self.combine(Op.ADD, other)

    def __sub__(self, other):
        return self.combine(Op.SUBTRACT, other)

    def __mul__(self, other):
        return self.combine(Op.MULTIPLY, other)

    def __truediv__(self, other):
        return self.combine(Op.DIVIDE, other)

    def __mod__(self, other):
        return self.combine(Op.MODULO, other)

    def __radd__(self, other):
        return self._reflected(Op.ADD, other)

    def __rsub__(self, other):
        """scalar - v gives (scalar - x, scalar - y)."""
        return self._reflected(Op.SUBTRACT, other)

    def __rmul__(self, other):
        return self._reflected(Op.MULTIPLY, other)

    def __rtruediv__(self, other):
        return self._reflected(Op.DIVIDE, other)

    def __rmod__(self, other):
        return self._reflected(Op.MODULO, other)

    # Negation and comparison

    def negated(self) -> "Vector2":
        """Return a sign-flipped copy."""
        return self.copy().negate()

    def __neg__(self) -> "Vector2":
        return self.negated()

    def negate(self) -> "Vector2":
        """Flip both signs in place. Returns self."""
        with np.errstate(**SILENT_ERRSTATE):
            self._x, self._y = cast(-self._x, self.dtype), cast(-self._y, self.dtype)
        return self

    def equals(self, other) -> bool:
        """Exact component-wise comparison, no tolerance."""
        if not isinstance(other, Vector2):
            return False
        return bool(self._x == other._x and self._y == other._y)

    def __eq__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.equals(other)

    def is_empty(self) -> bool:
        """True when both coordinates are zero."""
        return bool(self._x == 0 and self._y == 0)

    # Geometry

    def scalar_product(self, other: "Vector2") -> float:
        """
        Calculate the scalar (dot) product with another vector.

        Computed in Python float so integer components never wrap.
        Returns: |a| * |b| * cos(angle_between_vectors)
        """
        if not isinstance(other, Vector2):
            raise TypeError("scalar product needs another Vector2")
        return float(self._x) * float(other._x) + float(self._y) * float(other._y)

    dot = scalar_product

    @property
    def length(self) -> float:
        """Euclidean magnitude as a Python float, exactly 0.0 for empty vectors."""
        if self.is_empty():
            return 0.0
        x, y = float(self._x), float(self._y)
        return math.sqrt(x * x + y * y)

    def angle(self, other: "Vector2", degrees: bool = True) -> float:
        """
        Calculate the angle between two vectors.

        Returns degrees by default, radians when degrees is False.
        Returns nan when either vector has zero length.
        """
        if not isinstance(other, Vector2):
            raise TypeError("angle needs another Vector2")
        denominator = self.length * other.length
        if denominator == 0:
            return math.nan
        cosine = max(-1.0, min(1.0, self.scalar_product(other) / denominator))
        radians = math.acos(cosine)
        if degrees:
            return math.degrees(radians)
        return radians

    def diff(self, other: "Vector2") -> float:
        """Distance between the two points."""
        if not isinstance(other, Vector2):
            raise TypeError("diff needs another Vector2")
        dx = float(self._x) - float(other._x)
        dy = float(self._y) - float(other._y)
        return math.sqrt(dx * dx + dy * dy)

    def normalize(self) -> "Vector2":
        """
        Scale to unit length in place. Returns self.

        Zero vectors are left unchanged. Integer vectors truncate each
        quotient back to the component type, so they usually collapse to
        a unit axis or to zero.
        """
        length = self.length
        if length != 0:
            self._x = cast(float(self._x) / length, self.dtype)
            self._y = cast(float(self._y) / length, self.dtype)
        return self

    # Mutators

    def set(self, x, y) -> "Vector2":
        x, y = coerce_scalar(x, self.dtype), coerce_scalar(y, self.dtype)
        self._x, self._y = x, y
        return self

    def move(self, dx, dy) -> "Vector2":
        """Shift the coordinates by (dx, dy)."""
        x = self._compute(Op.ADD, self._x, coerce_scalar(dx, self.dtype))
        y = self._compute(Op.ADD, self._y, coerce_scalar(dy, self.dtype))
        self._x, self._y = x, y
        return self

    # Conversion

    def as_array(self) -> Tuple:
        """Snapshot of (x, y) as component-typed scalars."""
        return (self._x, self._y)

    def to_tuple(self) -> Tuple:
        """(x, y) as plain Python numbers, for pygame and pymunk call sites."""
        return (self._x.item(), self._y.item())

    def to_numpy(self) -> np.ndarray:
        return np.array([self._x, self._y], dtype=self.dtype)

    def copy(self) -> "Vector2":
        return self._wrap(self._x, self._y)

    def __copy__(self) -> "Vector2":
        return self.copy()

    def __deepcopy__(self, memo) -> "Vector2":
        return self.copy()

    def __iter__(self) -> Iterator:
        return iter((self._x, self._y))

    def __len__(self) -> int:
        return 2

    def __getitem__(self, index):
        return (self._x, self._y)[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._x.item()!r}, {self._y.item()!r})"


Vector2s = Vector2[np.int16]
Vector2f = Vector2[np.float32]
Vector2b = Vector2[np.int8]
Vector2i = Vector2[np.int32]
