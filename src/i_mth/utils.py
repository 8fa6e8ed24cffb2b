"""Physics formulas for celestial bodies.

All inputs and outputs are SI: mass in kilograms, radius in meters,
velocities in m/s and accelerations in m/s^2.
"""

import math

from .constants import G
from .errors import InvalidMassError, InvalidRadiusError


def _check_body(mass: float, radius: float) -> None:
    # negated comparisons also reject NaN
    if not radius > 0.0:
        raise InvalidRadiusError(radius)
    if not mass >= 0.0:
        raise InvalidMassError(mass)


def calc_acc_due_to_grav(mass_of_celestial_body: float, radius_of_celestial_body: float) -> float:
    """Acceleration due to gravity at the surface of a body, ``G * M / r^2``.

    Args:
        mass_of_celestial_body: Mass in kg.
        radius_of_celestial_body: Radius in m.

    Returns:
        Surface gravity in m/s^2 (positive magnitude). Results beyond the
        float range saturate to 0.0 or inf.

    Raises:
        InvalidRadiusError: If the radius is zero, negative or NaN.
        InvalidMassError: If the mass is negative or NaN.

    Example:
        >>> round(calc_acc_due_to_grav(5.972168e24, 6.371e6), 2)
        9.82
    """
    _check_body(mass_of_celestial_body, radius_of_celestial_body)
    # r * r or r ** 2 would overflow/underflow before the division
    return G * mass_of_celestial_body / radius_of_celestial_body / radius_of_celestial_body


calc_surface_gravity = calc_acc_due_to_grav


def calc_escape_velocity(mass_of_celestial_body: float, radius_of_celestial_body: float) -> float:
    """Escape velocity from the surface of a body, ``sqrt(2 * G * M / r)``.

    See https://en.wikipedia.org/wiki/Escape_velocity

    Args:
        mass_of_celestial_body: Mass in kg.
        radius_of_celestial_body: Radius in m.

    Returns:
        Escape velocity in m/s.

    Raises:
        InvalidRadiusError: If the radius is zero, negative or NaN.
        InvalidMassError: If the mass is negative or NaN.
    """
    _check_body(mass_of_celestial_body, radius_of_celestial_body)
    return math.sqrt((2.0 * G * mass_of_celestial_body) / radius_of_celestial_body)
