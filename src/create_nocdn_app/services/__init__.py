from .base import BaseService
from .errors import (
    DependencyMissingError,
    ExternalCommandFailedError,
    IoFailedError,
    ServiceFailure,
    TargetExistsError,
    UnexpectedStateError,
    ValidationFailedError,
)

__all__ = [
    "BaseService",
    "DependencyMissingError",
    "ExternalCommandFailedError",
    "IoFailedError",
    "ServiceFailure",
    "TargetExistsError",
    "UnexpectedStateError",
    "ValidationFailedError",
]
