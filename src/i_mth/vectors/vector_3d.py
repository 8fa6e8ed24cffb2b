"""Vector in 3 dimensional space.

x is along the i unit vector, y along j and z along k. Vectors are frozen
pydantic models: every operation returns a new vector and instances are
compared component by component with exact float equality.

Example:
    >>> f = Vector3D.new(400.0, 693.0, 0.0)
    >>> r = Vector3D.new(-0.2, 0.16, 0.0)
    >>> moment = r.cross(f)  # moment of f about the origin
    >>> round(moment.z, 6)
    -202.6
"""

import math
from typing import TYPE_CHECKING, Iterator, cast

import msgpack
import numpy as np
from pydantic import BaseModel, ConfigDict

from .. import constants
from ..constants import DEFAULT_TOLERANCE
from ..errors import InvalidComponentError, ZeroMagnitudeError
from .helpers import ieee_divide, is_scalar, to_float

if TYPE_CHECKING:
    from .vector_2d import Vector2D

_COMPONENT_LABELS = ("i", "j", "k", "x", "y", "z")


class Vector3D(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    # Construction

    @classmethod
    def new(cls, x: float, y: float, z: float) -> "Vector3D":
        """Return a vector with the passed components.

        No validation is applied beyond float coercion: NaN and infinities
        are stored unchanged.
        """
        return cls(x=x, y=y, z=z)

    @classmethod
    def set(cls, value: float) -> "Vector3D":
        """Return a vector with x, y and z all equal to ``value``."""
        return cls(x=value, y=value, z=value)

    @classmethod
    def i(cls) -> "Vector3D":
        return cls(x=1.0, y=0.0, z=0.0)

    @classmethod
    def j(cls) -> "Vector3D":
        return cls(x=0.0, y=1.0, z=0.0)

    @classmethod
    def k(cls) -> "Vector3D":
        return cls(x=0.0, y=0.0, z=1.0)

    @classmethod
    def origin(cls) -> "Vector3D":
        return cls(x=0.0, y=0.0, z=0.0)

    @classmethod
    def select(cls, comp: str, value: float) -> "Vector3D":
        """Return a vector with only the selected component set to ``value``.

        Args:
            comp: Component label, one of "i", "j", "k" or "x", "y", "z".
            value: Value of the selected component.

        Raises:
            InvalidComponentError: If the label is not recognized.

        Example:
            >>> Vector3D.select("y", -9.81).y
            -9.81
        """
        if comp in ("i", "x"):
            return cls(x=value)
        if comp in ("j", "y"):
            return cls(y=value)
        if comp in ("k", "z"):
            return cls(z=value)
        raise InvalidComponentError(comp, _COMPONENT_LABELS)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Vector3D":
        """Create from a numpy array (or any sequence) of three numbers."""
        if len(arr) != 3:
            raise ValueError(f"Expected 3 components, got {len(arr)}")
        return cls(x=float(arr[0]), y=float(arr[1]), z=float(arr[2]))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_2d(self) -> "Vector2D":
        """Return a 2D vector by dropping the z component."""
        from .vector_2d import Vector2D

        return Vector2D(x=self.x, y=self.y)

    # Arithmetic

    def add(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def subtract(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)

    def scale(self, value: float) -> "Vector3D":
        value = to_float(value)
        return Vector3D(x=self.x * value, y=self.y * value, z=self.z * value)

    def divide(self, value: float) -> "Vector3D":
        """Divide every component by ``value``.

        A zero divisor gives infinite or NaN components rather than raising.
        """
        return Vector3D(
            x=ieee_divide(self.x, value),
            y=ieee_divide(self.y, value),
            z=ieee_divide(self.z, value),
        )

    def negate(self) -> "Vector3D":
        return Vector3D(x=-self.x, y=-self.y, z=-self.z)

    def scale_comps_by_comps(self, other: "Vector3D") -> "Vector3D":
        """Multiply x by x, y by y and z by z."""
        return Vector3D(x=self.x * other.x, y=self.y * other.y, z=self.z * other.z)

    def add_scaled(self, other: "Vector3D", value: float) -> "Vector3D":
        """Return ``self + other * value``."""
        return self.add(other.scale(value))

    def scale_add(self, value: float, other: "Vector3D") -> "Vector3D":
        """Return ``self * value + other``."""
        return self.scale(value).add(other)

    def abs(self) -> "Vector3D":
        return Vector3D(x=abs(self.x), y=abs(self.y), z=abs(self.z))

    def __add__(self, other: object) -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "Vector3D":
        if isinstance(other, Vector3D):
            return self.scale_comps_by_comps(other)
        if is_scalar(other):
            return self.scale(cast(float, other))
        return NotImplemented

    def __rmul__(self, other: object) -> "Vector3D":
        if is_scalar(other):
            return self.scale(cast(float, other))
        return NotImplemented

    def __truediv__(self, other: object) -> "Vector3D":
        if isinstance(other, Vector3D):
            return Vector3D(
                x=ieee_divide(self.x, other.x),
                y=ieee_divide(self.y, other.y),
                z=ieee_divide(self.z, other.z),
            )
        if is_scalar(other):
            return self.divide(cast(float, other))
        return NotImplemented

    def __neg__(self) -> "Vector3D":
        return self.negate()

    def __getitem__(self, index: int) -> float:
        try:
            return self.to_tuple()[index]
        except IndexError:
            raise IndexError(f"Vector3D index out of range: {index}") from None

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        return iter(self.to_tuple())

    def __eq__(self, other: object) -> bool:
        # field-wise float ==, so NaN components never compare equal
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.is_equal_to(other)

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    # Geometry

    def dot(self, other: "Vector3D") -> float:
        """Dot product: measures how aligned two vectors are."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3D") -> "Vector3D":
        """Cross product: a vector perpendicular to both inputs.

        ``a.cross(b) == -(b.cross(a))`` holds exactly.
        """
        return Vector3D(
            x=self.y * other.z - self.z * other.y,
            y=self.z * other.x - self.x * other.z,
            z=self.x * other.y - self.y * other.x,
        )

    def triple_scalar_prod(self, oth_1: "Vector3D", oth_2: "Vector3D") -> float:
        """Return ``self . (oth_1 x oth_2)``."""
        return self.dot(oth_1.cross(oth_2))

    def triple_vector_prod(self, oth_1: "Vector3D", oth_2: "Vector3D") -> "Vector3D":
        """Return ``self x (oth_1 x oth_2)``."""
        return self.cross(oth_1.cross(oth_2))

    def squared_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def magnitude(self) -> float:
        """Length of the vector (Euclidean norm)."""
        # hypot avoids overflow/underflow of the intermediate squares
        return math.hypot(self.x, self.y, self.z)

    def length(self) -> float:
        return self.magnitude()

    def normalize(self) -> "Vector3D":
        """Unit vector with the same direction.

        Raises:
            ZeroMagnitudeError: If the vector has zero magnitude. Vectors with
                NaN or infinite components do not raise; they yield NaN
                components.
        """
        mag = self.magnitude()
        if mag == 0.0:
            raise ZeroMagnitudeError("Cannot normalize a zero vector")
        return Vector3D(x=self.x / mag, y=self.y / mag, z=self.z / mag)

    def normalized(self) -> "Vector3D":
        return self.normalize()

    def distance_to(self, other: "Vector3D") -> float:
        """Distance between two points."""
        return self.subtract(other).magnitude()

    # Comparison

    def is_equal_to(self, other: "Vector3D") -> bool:
        return self.x == other.x and self.y == other.y and self.z == other.z

    def is_close(
        self,
        other: "Vector3D",
        abs_tol: float = DEFAULT_TOLERANCE,
        rel_tol: float = 1e-9,
    ) -> bool:
        """Component-wise ``math.isclose``."""
        return all(
            math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self.to_tuple(), other.to_tuple())
        )

    def is_greater_than(self, other: "Vector3D") -> bool:
        """True if this vector is longer than ``other``."""
        return self.squared_magnitude() > other.squared_magnitude()

    def comp_wise_gt(self, other: "Vector3D") -> bool:
        """True only if every component is greater than the matching one in ``other``."""
        return self.x > other.x and self.y > other.y and self.z > other.z

    # Coordinate systems

    def as_cylindrical(self) -> "Vector3D":
        """Return ``(rho, phi, z)`` with phi measured from the x axis in radians."""
        return Vector3D(x=math.hypot(self.x, self.y), y=math.atan2(self.y, self.x), z=self.z)

    def as_spherical(self) -> "Vector3D":
        """Return ``(r, theta, phi)``.

        theta is the polar angle from the z axis and phi the azimuth from the
        x axis, both in radians.

        Raises:
            ZeroMagnitudeError: If the vector has zero magnitude.
        """
        r = self.magnitude()
        if r == 0.0:
            raise ZeroMagnitudeError("Spherical angles are undefined for a zero vector")
        return Vector3D(x=r, y=math.acos(self.z / r), z=math.atan2(self.y, self.x))

    # Display and serialization

    def __str__(self) -> str:
        return f"{self.x}i + {self.y}j + {self.z}k"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        x, y, z = (format(c, format_spec) for c in self.to_tuple())
        return f"{x}i + {y}j + {z}k"

    def to_bytes(self) -> bytes:
        return cast(bytes, msgpack.packb(self.model_dump()))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Vector3D":
        if constants.SKIP_VALIDATION:
            return cls.model_construct(**msgpack.unpackb(data))
        return cls.model_validate(msgpack.unpackb(data))
