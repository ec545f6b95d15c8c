"""Exception types raised by radial-wheel."""


class RadialWheelError(Exception):
    """Base class for all radial-wheel errors."""


class DataLoadFailure(RadialWheelError):
    """The wheel dataset could not be read or parsed."""


class ConfigError(RadialWheelError):
    """A configuration value is missing or out of range."""
