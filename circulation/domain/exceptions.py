"""
Domain layer exceptions.

These exceptions represent circulation errors raised when caller input is
malformed, when a business rule is violated, or when a referenced entity
does not exist. The string form of each exception is exactly its message,
which callers surface to library staff unchanged.
"""


class CirculationError(Exception):
    """
    Base exception for all circulation errors.

    All domain exceptions inherit from this class so they can be caught and
    handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ArgumentError(CirculationError, ValueError):
    """
    Raised when caller input is malformed.

    Detected before any collaborator is consulted. Example: a title shorter
    than the minimum length, or a copy count outside the allowed range.
    """

    def __init__(self, message: str, argument: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if argument:
            details["argument"] = argument
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.argument = argument
        self.value = value


class InvalidOperationError(CirculationError):
    """
    Raised when a circulation rule forbids the requested operation.

    Example: a suspended member borrowing, or a return without signature.
    """


class NotFoundError(CirculationError, LookupError):
    """
    Raised when a member, book or borrow record cannot be found.
    """

    def __init__(self, entity_type: str, entity_id: object) -> None:
        message = f"{entity_type} {entity_id!r} not found."
        super().__init__(message, {"entity_type": entity_type, "entity_id": entity_id})
        self.entity_type = entity_type
        self.entity_id = entity_id
