"""Vectors, constants and formulas for statics and dynamics problems."""

from .errors import (
    DomainError,
    InvalidComponentError,
    InvalidMassError,
    InvalidRadiusError,
    ZeroMagnitudeError,
)
from .utils import calc_acc_due_to_grav, calc_escape_velocity, calc_surface_gravity
from .vectors import Vector2D, Vector3D

__all__ = [
    "DomainError",
    "InvalidComponentError",
    "InvalidMassError",
    "InvalidRadiusError",
    "Vector2D",
    "Vector3D",
    "ZeroMagnitudeError",
    "calc_acc_due_to_grav",
    "calc_escape_velocity",
    "calc_surface_gravity",
]
