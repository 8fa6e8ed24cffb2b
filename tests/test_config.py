"""Tests for MthConfig loading and validation."""

import tempfile

import pytest
import yaml
from pydantic import ValidationError

from i_mth.config import BodyConfig, MthConfig
from i_mth.constants import EARTH_MASS, MOON_RADIUS


class TestMthConfig:
    def test_default_config(self) -> None:
        config = MthConfig()
        assert config.precision == 4
        assert not config.debug
        assert [b.name for b in config.bodies] == ["Earth", "Moon"]
        assert config.bodies[0].mass == EARTH_MASS
        assert config.bodies[1].radius == MOON_RADIUS

    def test_default_bodies_not_shared(self) -> None:
        a = MthConfig()
        b = MthConfig()
        a.bodies.append(BodyConfig(name="Mars", mass=6.417e23, radius=3.3895e6))
        assert len(b.bodies) == 2

    def test_from_yaml_none_returns_default(self) -> None:
        config = MthConfig.from_yaml(None)
        assert config.precision == 4

    def test_from_yaml_missing_file_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            MthConfig.from_yaml("/nonexistent/config.yaml")

    def test_from_yaml_valid_file(self) -> None:
        data = {
            "precision": 2,
            "debug": True,
            "bodies": [{"name": "Mars", "mass": 6.417e23, "radius": 3.3895e6}],
        }
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml.dump(data, f)
            f.flush()

            config = MthConfig.from_yaml(f.name)
            assert config.precision == 2
            assert config.debug is True
            assert len(config.bodies) == 1
            assert config.bodies[0].name == "Mars"
            assert config.bodies[0].radius == 3.3895e6

    def test_from_yaml_unspecified_fields_use_defaults(self) -> None:
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml.dump({"debug": True}, f)
            f.flush()

            config = MthConfig.from_yaml(f.name)
            assert config.precision == 4
            assert len(config.bodies) == 2

    def test_from_yaml_empty_file(self) -> None:
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("")
            f.flush()

            config = MthConfig.from_yaml(f.name)
            assert config.precision == 4

    def test_from_yaml_invalid_types(self) -> None:
        data = {"precision": "not_a_number"}
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            yaml.dump(data, f)
            f.flush()

            with pytest.raises(ValidationError):
                MthConfig.from_yaml(f.name)


class TestBodyConfig:
    def test_missing_radius_raises(self) -> None:
        with pytest.raises(ValidationError):
            BodyConfig(name="Ceres", mass=9.38e20)  # type: ignore[call-arg]

    def test_negative_radius_is_accepted(self) -> None:
        """Radius is validated by the formulas, not by the config."""
        body = BodyConfig(name="Broken", mass=1.0, radius=-1.0)
        assert body.radius == -1.0
