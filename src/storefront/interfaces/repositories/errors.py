"""Repository-related error definitions."""


class RepositoryError(Exception):
    """Base class for repository-related errors."""


class NotFoundError(RepositoryError):
    """Raised when an entity cannot be found in its repository."""

    entity_name: str
    entity_id: str

    def __init__(self, entity_name: str, entity_id: str):
        super().__init__(f"{entity_name} not found")
        self.entity_name = entity_name
        self.entity_id = entity_id


class PersistenceError(RepositoryError):
    """Raised when the underlying storage rejects or fails an operation.

    The enclosing transaction must be rolled back; no partial write is kept.
    """
