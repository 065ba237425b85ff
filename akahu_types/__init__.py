"""Validation and canonicalization of NZ bank account numbers and Akahu identifiers."""

from akahu_types.account_number import BankAccountNumber
from akahu_types.banks import BankIdentity, BankPrefix, all_banks, resolve
from akahu_types.exceptions import (
    AkahuTypesError,
    ConfigurationError,
    InvalidAccountNumberError,
    InvalidIdentifierError,
    PayloadError,
    UnknownIdentifierKindError,
    ValidationError,
)
from akahu_types.identifiers import (
    AccountId,
    AuthorizationId,
    CategoryId,
    ConnectionId,
    IdentifierKind,
    MerchantId,
    PaymentId,
    TransactionId,
    TransferId,
    UserId,
    ValidatedIdentifier,
    from_trusted_source,
    from_user_input,
    identifier_type,
)

__version__ = "0.1.0"

__all__ = [
    "AccountId",
    "AkahuTypesError",
    "AuthorizationId",
    "BankAccountNumber",
    "BankIdentity",
    "BankPrefix",
    "CategoryId",
    "ConfigurationError",
    "ConnectionId",
    "IdentifierKind",
    "InvalidAccountNumberError",
    "InvalidIdentifierError",
    "MerchantId",
    "PaymentId",
    "PayloadError",
    "TransactionId",
    "TransferId",
    "UnknownIdentifierKindError",
    "UserId",
    "ValidatedIdentifier",
    "ValidationError",
    "all_banks",
    "from_trusted_source",
    "from_user_input",
    "identifier_type",
    "resolve",
]
