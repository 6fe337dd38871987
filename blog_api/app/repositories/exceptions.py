"""
Errors raised by the repositories.

All of them derive from ``ValueError`` so callers that only care about
"bad input" can catch that, while handlers that need to map errors to
specific HTTP statuses catch :class:`DuplicateIdError` or
:class:`NotFoundError`.
"""


class RepositoryError(ValueError):
    """Base class for repository errors carrying the offending id."""

    kind = "Entity"

    def __init__(self, entity_id: int) -> None:
        self.entity_id = entity_id
        super().__init__(self._format())

    def _format(self) -> str:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.entity_id == other.entity_id

    def __hash__(self) -> int:
        return hash((type(self), self.entity_id))


class DuplicateIdError(RepositoryError):
    """An entity with the same id is already stored."""

    def _format(self) -> str:
        return f"Error: {self.kind} with id: {self.entity_id} already exists in the repository!"


class NotFoundError(RepositoryError):
    """No entity with the requested id is stored."""

    def _format(self) -> str:
        return f"Error: {self.kind} with id: {self.entity_id} was not found in the repository!"


class PostAlreadyExistsError(DuplicateIdError):
    kind = "Post"


class PostNotFoundError(NotFoundError):
    kind = "Post"


class CommentAlreadyExistsError(DuplicateIdError):
    kind = "Comment"


class CommentNotFoundError(NotFoundError):
    kind = "Comment"
