"""Demo entry point: worked statics and gravitation examples."""

import argparse
import logging

from dotenv import load_dotenv

from .config import MthConfig
from .errors import DomainError
from .utils import calc_escape_velocity, calc_surface_gravity
from .vectors import Vector3D

logger = logging.getLogger(__name__)


def moment_of_force(r: Vector3D, f: Vector3D) -> Vector3D:
    """Moment of force ``f`` applied at position ``r`` about the origin, ``r x F``."""
    return r.cross(f)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="i-mth worked examples")
    parser.add_argument("--config", type=str, help="Path to config.yaml")
    args = parser.parse_args(argv)

    load_dotenv()

    # Load configuration
    config = MthConfig.from_yaml(args.config)

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    fmt = f".{config.precision}f"

    f = Vector3D.new(400.0, 693.0, 0.0)
    r = Vector3D.new(-0.2, 0.16, 0.0)
    moment = moment_of_force(r, f)
    logger.debug(f"r = {r}, F = {f}")
    print(f"Moment of F = {f:{fmt}} N at r = {r:{fmt}} m: {moment:{fmt}} N.m")

    for body in config.bodies:
        try:
            v_esc = calc_escape_velocity(body.mass, body.radius)
            g = calc_surface_gravity(body.mass, body.radius)
        except DomainError as e:
            logger.error(f"Skipping {body.name}: {e}")
            continue
        logger.debug(f"{body.name}: mass={body.mass} kg radius={body.radius} m")
        print(
            f"{body.name}: escape velocity {v_esc / 1000:{fmt}} km/s, "
            f"surface gravity {g:{fmt}} m/s^2"
        )


if __name__ == "__main__":
    main()
