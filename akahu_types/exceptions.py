"""Custom exception hierarchy for akahu-types."""


class AkahuTypesError(Exception):
    """Base exception for all akahu-types errors."""


class ValidationError(AkahuTypesError, ValueError):
    """Raised when untrusted text is not a valid instance of a structured format."""


class InvalidAccountNumberError(ValidationError):
    """Raised when text is not a valid NZ bank account number.

    Parameters
    ----------
    original_text : str
        The rejected input, verbatim.
    """

    def __init__(self, original_text: str) -> None:
        self.original_text = original_text
        super().__init__(
            f"Invalid NZ bank account number: '{original_text}' "
            "(expected format: XX-XXXX-XXXXXXX-XXX)"
        )


class InvalidIdentifierError(ValidationError):
    """Raised when text lacks the literal prefix required for an identifier kind.

    Parameters
    ----------
    kind_name : str
        Identifier kind, e.g. ``"account"``.
    expected_prefix : str
        Prefix the text must start with, e.g. ``"acc_"``.
    original_text : str
        The rejected input, verbatim.
    """

    def __init__(self, kind_name: str, expected_prefix: str, original_text: str) -> None:
        self.kind_name = kind_name
        self.expected_prefix = expected_prefix
        self.original_text = original_text
        super().__init__(
            f"Invalid {kind_name} identifier: expected prefix "
            f"'{expected_prefix}', got '{original_text}'"
        )


class UnknownIdentifierKindError(AkahuTypesError, KeyError):
    """Raised when an identifier kind name is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class PayloadError(AkahuTypesError):
    """Raised when an API payload is missing a required field."""


class ConfigurationError(AkahuTypesError):
    """Raised when configuration is invalid or missing."""
