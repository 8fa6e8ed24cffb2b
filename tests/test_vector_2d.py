"""Tests for the Vector2D value type."""

import math

import msgpack
import pytest
from pydantic import ValidationError

from i_mth.errors import InvalidComponentError, ZeroMagnitudeError
from i_mth.vectors import Vector2D, Vector3D


class TestVector2D:
    def test_new_stores_components(self) -> None:
        v = Vector2D.new(1.5, -2.5)
        assert v.x == 1.5
        assert v.y == -2.5

    def test_set(self) -> None:
        assert Vector2D.set(3.0) == Vector2D.new(3.0, 3.0)

    def test_unit_vectors_and_origin(self) -> None:
        assert Vector2D.i() == Vector2D.new(1.0, 0.0)
        assert Vector2D.j() == Vector2D.new(0.0, 1.0)
        assert Vector2D.origin() == Vector2D()

    def test_select(self) -> None:
        assert Vector2D.select("j", -9.81) == Vector2D.new(0.0, -9.81)
        assert Vector2D.select("x", 2.0) == Vector2D.new(2.0, 0.0)

    def test_select_z_is_invalid(self) -> None:
        with pytest.raises(InvalidComponentError):
            Vector2D.select("z", 1.0)

    def test_invalid_type_raises(self) -> None:
        with pytest.raises(ValidationError):
            Vector2D(y="bad")  # type: ignore[arg-type]

    def test_arithmetic(self) -> None:
        a = Vector2D.new(1.0, 2.0)
        b = Vector2D.new(3.0, -4.0)
        assert a + b == Vector2D.new(4.0, -2.0)
        assert a - b == Vector2D.new(-2.0, 6.0)
        assert a * 2 == Vector2D.new(2.0, 4.0)
        assert 2 * a == a * 2
        assert a / 2 == Vector2D.new(0.5, 1.0)
        assert -a == Vector2D.new(-1.0, -2.0)
        assert a * b == Vector2D.new(3.0, -8.0)

    def test_division_by_zero_gives_infinity(self) -> None:
        assert Vector2D.new(1.0, -1.0) / 0.0 == Vector2D.new(math.inf, -math.inf)

    def test_mixing_dimensions_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            Vector2D.i() - Vector3D.i()  # type: ignore[operator]

    def test_dot(self) -> None:
        assert Vector2D.new(1.0, 2.0).dot(Vector2D.new(3.0, 4.0)) == 11.0

    def test_cross_is_scalar(self) -> None:
        assert Vector2D.i().cross(Vector2D.j()) == 1.0
        assert Vector2D.j().cross(Vector2D.i()) == -1.0

    def test_cross_matches_3d_z_component(self) -> None:
        a = Vector2D.new(-0.2, 0.16)
        b = Vector2D.new(400.0, 693.0)
        assert a.cross(b) == a.to_3d().cross(b.to_3d()).z

    def test_magnitude_and_normalize(self) -> None:
        v = Vector2D.new(3.0, 4.0)
        assert v.magnitude() == 5.0
        assert v.length() == 5.0
        assert v.squared_magnitude() == 25.0
        assert v.normalize().is_close(Vector2D.new(0.6, 0.8))
        assert v.normalized().magnitude() == pytest.approx(1.0, abs=1e-9)

    def test_normalize_zero_vector_raises(self) -> None:
        with pytest.raises(ZeroMagnitudeError):
            Vector2D.origin().normalize()

    def test_helpers(self) -> None:
        a = Vector2D.new(-1.0, 2.0)
        b = Vector2D.new(0.5, 0.5)
        assert a.abs() == Vector2D.new(1.0, 2.0)
        assert a.add_scaled(b, 2.0) == Vector2D.new(0.0, 3.0)
        assert a.scale_add(2.0, b) == Vector2D.new(-1.5, 4.5)
        assert a.scale_comps_by_comps(b) == Vector2D.new(-0.5, 1.0)
        assert Vector2D.origin().distance_to(Vector2D.new(3.0, 4.0)) == 5.0

    def test_comparisons(self) -> None:
        assert Vector2D.new(2.0, 2.0).is_equal_to(Vector2D.set(2.0))
        assert Vector2D.new(0.0, 3.0).is_greater_than(Vector2D.set(2.0))
        assert Vector2D.set(2.0).comp_wise_gt(Vector2D.set(1.0))
        assert not Vector2D.new(2.0, 1.0).comp_wise_gt(Vector2D.set(1.0))

    def test_as_polar(self) -> None:
        p = Vector2D.new(0.0, -2.0).as_polar()
        assert p.is_close(Vector2D.new(2.0, -math.pi / 2))
        assert Vector2D.new(0.0, -2.0).as_cylindrical() == p

    def test_to_3d(self) -> None:
        assert Vector2D.new(1.0, 2.0).to_3d(3.0) == Vector3D.new(1.0, 2.0, 3.0)
        assert Vector2D.new(1.0, 2.0).to_3d() == Vector3D.new(1.0, 2.0, 0.0)

    def test_indexing(self) -> None:
        v = Vector2D.new(1.0, 2.0)
        assert v[0] == 1.0
        assert v[1] == 2.0
        with pytest.raises(IndexError):
            v[2]

    def test_nan_never_equal(self) -> None:
        v = Vector2D.new(math.nan, 1.0)
        assert v != v
        assert Vector2D.new(float("nan"), 1.0) != Vector2D.new(float("nan"), 1.0)

    def test_iteration(self) -> None:
        x, y = Vector2D.new(3.0, 4.0)
        assert (x, y) == (3.0, 4.0)
        assert list(Vector2D.i()) == [1.0, 0.0]

    def test_huge_int_scalars(self) -> None:
        assert Vector2D.new(1.0, -1.0) / 10**400 == Vector2D.origin()
        assert -(10**400) * Vector2D.new(1.0, -1.0) == Vector2D.new(-math.inf, math.inf)

    def test_display(self) -> None:
        v = Vector2D.new(1.0, -0.5)
        assert str(v) == "1.0i + -0.5j"
        assert f"{v:.3f}" == "1.000i + -0.500j"

    def test_msgpack_roundtrip(self) -> None:
        v = Vector2D.new(1.25, -7.0)
        assert msgpack.unpackb(v.to_bytes()) == {"x": 1.25, "y": -7.0}
        assert Vector2D.from_bytes(v.to_bytes()) == v
