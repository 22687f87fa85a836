"""
Core package for the Petskub share service.
Provides the application exception hierarchy.
"""

from .exceptions import (
    PetskubException,
    MissingParameterError,
    ConfigurationError,
    ExternalServiceError,
    DataStoreError,
)

__all__ = [
    "PetskubException",
    "MissingParameterError",
    "ConfigurationError",
    "ExternalServiceError",
    "DataStoreError",
]
