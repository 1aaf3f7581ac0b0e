"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity, envelope or holding does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DuplicateError(ConflictError):
    """An envelope, category or entity with the same key already exists."""


class InsufficientFundsError(ValidationError):
    """Ledger operation would overdraw a balance or credit limit."""


def amount_must_be_positive(kind: str) -> str:
    """Return message for a non-positive money amount."""
    return f"{kind} amount must be positive"


def percentage_out_of_range(percentage) -> str:
    """Return message for a percentage outside [0, 1]."""
    return f"Percentage must be between 0 and 1, got {percentage}"


def envelope_not_found(name: str) -> str:
    """Return message for missing envelope."""
    return f"Envelope '{name}' not found"


def duplicate_envelope(name: str) -> str:
    """Return message for an envelope that already exists."""
    return f"Envelope with name '{name}' already exists"


def holding_not_found(symbol: str) -> str:
    """Return message for missing investment holding."""
    return f"No holding found for {symbol}"


def entity_not_found(kind: str, entity_id: str) -> str:
    """Return message for a missing stored entity."""
    return f"{kind} '{entity_id}' not found"


def duplicate_entity(kind: str, entity_id: str) -> str:
    """Return message for a stored entity whose ID is already taken."""
    return f"{kind} with id '{entity_id}' already exists"
