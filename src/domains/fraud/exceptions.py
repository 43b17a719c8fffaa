"""Exceptions raised by the fraud domain."""


class FraudDomainError(Exception):
    """Base class for fraud domain errors."""


class InvalidTransactionError(FraudDomainError, ValueError):
    """A transaction failed validation and cannot be evaluated.

    ``fields`` names every attribute that was rejected so callers can report
    the problem without parsing the message.
    """

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = fields or []
