"""Vector in 2 dimensional space, the planar sibling of Vector3D."""

import math
from typing import Iterator, cast

import msgpack
import numpy as np
from pydantic import BaseModel, ConfigDict

from .. import constants
from ..constants import DEFAULT_TOLERANCE
from ..errors import InvalidComponentError, ZeroMagnitudeError
from .helpers import ieee_divide, is_scalar, to_float
from .vector_3d import Vector3D

_COMPONENT_LABELS = ("i", "j", "x", "y")


class Vector2D(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def new(cls, x: float, y: float) -> "Vector2D":
        return cls(x=x, y=y)

    @classmethod
    def set(cls, value: float) -> "Vector2D":
        return cls(x=value, y=value)

    @classmethod
    def i(cls) -> "Vector2D":
        return cls(x=1.0, y=0.0)

    @classmethod
    def j(cls) -> "Vector2D":
        return cls(x=0.0, y=1.0)

    @classmethod
    def origin(cls) -> "Vector2D":
        return cls(x=0.0, y=0.0)

    @classmethod
    def select(cls, comp: str, value: float) -> "Vector2D":
        """Return a vector with only the selected component ("i"/"x" or "j"/"y") set."""
        if comp in ("i", "x"):
            return cls(x=value)
        if comp in ("j", "y"):
            return cls(y=value)
        raise InvalidComponentError(comp, _COMPONENT_LABELS)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Vector2D":
        if len(arr) != 2:
            raise ValueError(f"Expected 2 components, got {len(arr)}")
        return cls(x=float(arr[0]), y=float(arr[1]))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_3d(self, z: float = 0.0) -> Vector3D:
        """Lift into 3D space with the passed z component."""
        return Vector3D(x=self.x, y=self.y, z=z)

    def add(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(x=self.x + other.x, y=self.y + other.y)

    def subtract(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(x=self.x - other.x, y=self.y - other.y)

    def scale(self, value: float) -> "Vector2D":
        value = to_float(value)
        return Vector2D(x=self.x * value, y=self.y * value)

    def divide(self, value: float) -> "Vector2D":
        return Vector2D(x=ieee_divide(self.x, value), y=ieee_divide(self.y, value))

    def negate(self) -> "Vector2D":
        return Vector2D(x=-self.x, y=-self.y)

    def scale_comps_by_comps(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(x=self.x * other.x, y=self.y * other.y)

    def add_scaled(self, other: "Vector2D", value: float) -> "Vector2D":
        return self.add(other.scale(value))

    def scale_add(self, value: float, other: "Vector2D") -> "Vector2D":
        return self.scale(value).add(other)

    def abs(self) -> "Vector2D":
        return Vector2D(x=abs(self.x), y=abs(self.y))

    def __add__(self, other: object) -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Vector2D":
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "Vector2D":
        if isinstance(other, Vector2D):
            return self.scale_comps_by_comps(other)
        if is_scalar(other):
            return self.scale(cast(float, other))
        return NotImplemented

    def __rmul__(self, other: object) -> "Vector2D":
        if is_scalar(other):
            return self.scale(cast(float, other))
        return NotImplemented

    def __truediv__(self, other: object) -> "Vector2D":
        if isinstance(other, Vector2D):
            return Vector2D(x=ieee_divide(self.x, other.x), y=ieee_divide(self.y, other.y))
        if is_scalar(other):
            return self.divide(cast(float, other))
        return NotImplemented

    def __neg__(self) -> "Vector2D":
        return self.negate()

    def __getitem__(self, index: int) -> float:
        try:
            return self.to_tuple()[index]
        except IndexError:
            raise IndexError(f"Vector2D index out of range: {index}") from None

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        return iter(self.to_tuple())

    def __eq__(self, other: object) -> bool:
        # field-wise float ==, so NaN components never compare equal
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.is_equal_to(other)

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2D") -> float:
        """Scalar cross product, the z component of ``(a, 0) x (b, 0)``.

        Positive when ``other`` is counterclockwise from this vector.
        """
        return self.x * other.y - self.y * other.x

    def squared_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def length(self) -> float:
        return self.magnitude()

    def normalize(self) -> "Vector2D":
        """Unit vector with the same direction; raises ZeroMagnitudeError on a zero vector."""
        mag = self.magnitude()
        if mag == 0.0:
            raise ZeroMagnitudeError("Cannot normalize a zero vector")
        return Vector2D(x=self.x / mag, y=self.y / mag)

    def normalized(self) -> "Vector2D":
        return self.normalize()

    def distance_to(self, other: "Vector2D") -> float:
        return self.subtract(other).magnitude()

    def is_equal_to(self, other: "Vector2D") -> bool:
        return self.x == other.x and self.y == other.y

    def is_close(
        self,
        other: "Vector2D",
        abs_tol: float = DEFAULT_TOLERANCE,
        rel_tol: float = 1e-9,
    ) -> bool:
        return math.isclose(self.x, other.x, rel_tol=rel_tol, abs_tol=abs_tol) and math.isclose(
            self.y, other.y, rel_tol=rel_tol, abs_tol=abs_tol
        )

    def is_greater_than(self, other: "Vector2D") -> bool:
        return self.squared_magnitude() > other.squared_magnitude()

    def comp_wise_gt(self, other: "Vector2D") -> bool:
        return self.x > other.x and self.y > other.y

    def as_polar(self) -> "Vector2D":
        """Return ``(rho, phi)`` with phi measured from the x axis in radians."""
        return Vector2D(x=math.hypot(self.x, self.y), y=math.atan2(self.y, self.x))

    def as_cylindrical(self) -> "Vector2D":
        return self.as_polar()

    def __str__(self) -> str:
        return f"{self.x}i + {self.y}j"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return f"{format(self.x, format_spec)}i + {format(self.y, format_spec)}j"

    def to_bytes(self) -> bytes:
        return cast(bytes, msgpack.packb(self.model_dump()))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Vector2D":
        if constants.SKIP_VALIDATION:
            return cls.model_construct(**msgpack.unpackb(data))
        return cls.model_validate(msgpack.unpackb(data))
