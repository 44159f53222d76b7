class ClothSimError(Exception):
    """Base class for errors raised by clothsim."""


class ConfigError(ClothSimError, ValueError):
    """Invalid simulation configuration."""


class MaterialError(ClothSimError, ValueError):
    """Invalid or unknown material profile."""
