"""Resume Store: async repository layer for a personal resume service.

Upper layers depend on the Protocols in resume_store.core.repository_protocols
and receive a Repositories bundle from resume_store.main.open_repositories.
"""

from resume_store.core.errors import (
    EntityValidationError, ErrorKind, NotFoundError, RepositoryError,
    error_kind, find_cause, root_cause, unwrap,
)
from resume_store.core.repository_protocols import Repositories

__all__ = [
    "EntityValidationError",
    "ErrorKind",
    "NotFoundError",
    "RepositoryError",
    "Repositories",
    "error_kind",
    "find_cause",
    "root_cause",
    "unwrap",
]
