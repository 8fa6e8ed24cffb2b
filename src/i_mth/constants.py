"""Mathematical and physical constants, all in SI units.

Sources:
    https://en.wikipedia.org/wiki/List_of_mathematical_constants
    https://en.wikipedia.org/wiki/List_of_physical_constants
"""

import os
from typing import Final

SKIP_VALIDATION = os.getenv("SKIP_VALIDATION", "0") == "1"

# Default absolute tolerance for approximate vector comparison
DEFAULT_TOLERANCE: Final = 1e-9

# Acceleration due to gravity at Earth's surface, signed (points down)
EARTH_GRAVITY: Final = -9.806_65  # m/s^2
STANDARD_GRAVITY: Final = 9.806_65  # m/s^2

EARTH_MASS: Final = 5.972_168e24  # kg
EARTH_RADIUS: Final = 6_371e3  # m
MOON_MASS: Final = 7.342e22  # kg
MOON_RADIUS: Final = 1_737.4e3  # m

# Newtonian gravitational constant
G: Final = 6.674_30e-11  # m^3 kg^-1 s^-2

PI: Final = 3.14159_26535_89793
TAU: Final = 6.28318_53071_79586
E: Final = 2.718_281_828_459_045

# Speed of light in vacuum, exact by definition
C: Final = 299_792_458  # m/s

VACUUM_PERMEABILITY: Final = 1.256_637_06e-6  # N/A^2
VACUUM_PERMITTIVITY: Final = 8.854_187_812_8e-12  # F/m
