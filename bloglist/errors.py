"""Error taxonomy shared by the validator, aggregator, identity and storage layers.

Every failure carries a ``kind`` and, where it applies, the offending
``field``.  The request boundary turns them into JSON responses using
``status_code``.
"""

from enum import Enum


class ErrorKind(str, Enum):
    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    INVALID_FIELD = "InvalidField"
    WEAK_CREDENTIAL = "WeakCredential"
    DUPLICATE_KEY = "DuplicateKey"
    NOT_FOUND = "NotFound"
    EMPTY_INPUT = "EmptyInput"


class BlogListError(Exception):
    """Base class for every distinguishable failure of the service."""

    status_code = 400

    def __init__(
        self, kind: ErrorKind, message: str, field: str | None = None
    ) -> None:
        self.kind = kind
        self.field = field
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, str | None]:
        return {"error": self.message, "kind": self.kind.value, "field": self.field}


class ValidationError(BlogListError):
    """A write was rejected before (or while) reaching storage."""

    @classmethod
    def missing(cls, field: str) -> "ValidationError":
        return cls(
            ErrorKind.MISSING_REQUIRED_FIELD, f"`{field}` is required", field=field
        )

    @classmethod
    def invalid(cls, field: str, reason: str) -> "ValidationError":
        return cls(ErrorKind.INVALID_FIELD, f"`{field}` {reason}", field=field)

    @classmethod
    def duplicate(cls, field: str, value: object) -> "ValidationError":
        return cls(
            ErrorKind.DUPLICATE_KEY,
            f"Error, expected `{field}` to be unique. Value: `{value}`",
            field=field,
        )


class NotFoundError(BlogListError):
    """Raised by storage when an id does not exist."""

    status_code = 404

    def __init__(self, collection: str, record_id: str) -> None:
        self.collection = collection
        self.record_id = record_id
        super().__init__(
            ErrorKind.NOT_FOUND, f"{collection} {record_id!r} not found", field="id"
        )


class EmptyInputError(BlogListError, ValueError):
    """An aggregate that needs at least one record was given none."""

    def __init__(self, message: str = "at least one blog is required") -> None:
        super().__init__(ErrorKind.EMPTY_INPUT, message)
