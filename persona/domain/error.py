"""Domain layer errors.

All of these are caller-correctable and are mapped to structured responses
at the router boundary. Anything else is treated as an internal failure.
"""

from collections.abc import Mapping, Sequence


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Input failed domain validation.

    Attributes:
        field_errors: Field path -> list of messages
    """

    def __init__(
        self,
        message: str = "Validation error",
        field_errors: Mapping[str, Sequence[str]] | None = None,
    ):
        self.message = message
        self.field_errors = {k: list(v) for k, v in (field_errors or {}).items()}
        super().__init__(message)

    @classmethod
    def from_pydantic(cls, error) -> "ValidationError":
        """Build from a ``pydantic.ValidationError``, keyed by dotted field path."""
        field_errors: dict[str, list[str]] = {}
        for item in error.errors():
            key = ".".join(str(part) for part in item["loc"]) or "__root__"
            field_errors.setdefault(key, []).append(item["msg"])
        return cls(field_errors=field_errors)


class PolicyError(DomainError):
    """Operation is well-formed but forbidden by a business rule."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class LastIdentityError(PolicyError):
    """Raised when deleting the only identity an account has left."""

    def __init__(self, identity_id: str):
        self.identity_id = identity_id
        super().__init__("Cannot delete your only identity")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found.

    Also raised when the resource exists but belongs to another account, so
    callers cannot probe for other accounts' identities.
    """

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
