"""Exceptions raised by Catpoint."""


class CatpointError(Exception):
    """Base exception for all Catpoint errors."""


class RepositoryError(CatpointError):
    """Security state could not be read or written."""


class SensorNotFoundError(RepositoryError):
    """Sensor is not known to the repository."""


class ImageAnalysisError(CatpointError):
    """Image analyzer failed to classify an image."""


class ConfigError(CatpointError):
    """Configuration is missing or malformed."""
