"""API record models built at the trust boundary."""

from akahu_types.models.account import Account
from akahu_types.models.enums import (
    AccountStatus,
    BankAccountKind,
    PaymentStatus,
    TransactionKind,
    TransferStatus,
)
from akahu_types.models.identity import Identity, IdentityAccount
from akahu_types.models.payment import Payment, PaymentDestination, PaymentRequest
from akahu_types.models.transaction import (
    Transaction,
    TransactionCategory,
    TransactionMerchant,
    TransactionMeta,
)
from akahu_types.models.transfer import Transfer, TransferRequest

__all__ = [
    "Account",
    "AccountStatus",
    "BankAccountKind",
    "Identity",
    "IdentityAccount",
    "Payment",
    "PaymentDestination",
    "PaymentRequest",
    "PaymentStatus",
    "Transaction",
    "TransactionCategory",
    "TransactionKind",
    "TransactionMerchant",
    "TransactionMeta",
    "Transfer",
    "TransferRequest",
    "TransferStatus",
]
