"""Exceptions raised for mathematically or physically undefined inputs."""


class DomainError(ValueError):
    """Base exception for inputs outside an operation's domain."""

    pass


class InvalidRadiusError(DomainError):
    """Raised when a body radius is zero, negative or NaN."""

    def __init__(self, radius: float):
        self.radius = radius
        super().__init__(f"radius must be > 0, got {radius}")


class ZeroMagnitudeError(DomainError):
    """Raised when an operation needs a direction but the vector has none."""

    pass


class InvalidComponentError(DomainError):
    """Raised when an unknown component label is selected."""

    def __init__(self, label: str, valid: tuple[str, ...]):
        self.label = label
        super().__init__(f"Unknown component {label!r}, expected one of {', '.join(valid)}")


class InvalidMassError(DomainError):
    """Raised when a body mass is negative or NaN."""

    def __init__(self, mass: float):
        self.mass = mass
        super().__init__(f"mass must be >= 0, got {mass}")
