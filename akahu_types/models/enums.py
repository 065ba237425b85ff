"""Enumeration types for API records."""

from enum import Enum


class AccountStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class BankAccountKind(str, Enum):
    """The ``type`` of a connected account."""

    CHECKING = "CHECKING"
    SAVINGS = "SAVINGS"
    CREDITCARD = "CREDITCARD"
    LOAN = "LOAN"
    KIWISAVER = "KIWISAVER"
    INVESTMENT = "INVESTMENT"
    TERMDEPOSIT = "TERMDEPOSIT"
    FOREIGN = "FOREIGN"
    TAX = "TAX"
    REWARDS = "REWARDS"
    WALLET = "WALLET"


class TransactionKind(str, Enum):
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"
    PAYMENT = "PAYMENT"
    TRANSFER = "TRANSFER"
    STANDING_ORDER = "STANDING ORDER"
    EFTPOS = "EFTPOS"
    INTEREST = "INTEREST"
    FEE = "FEE"
    TAX = "TAX"
    CREDIT_CARD = "CREDIT CARD"
    DIRECT_DEBIT = "DIRECT DEBIT"
    DIRECT_CREDIT = "DIRECT CREDIT"
    ATM = "ATM"
    LOAN = "LOAN"


class TransferStatus(str, Enum):
    READY = "READY"
    PENDING_APPROVAL = "PENDING_APPROVAL"
    SENT = "SENT"
    DECLINED = "DECLINED"
    ERROR = "ERROR"
    PAUSED = "PAUSED"
    CANCELLED = "CANCELLED"


class PaymentStatus(str, Enum):
    READY = "READY"
    PENDING_APPROVAL = "PENDING_APPROVAL"
    PAUSED = "PAUSED"
    SENT = "SENT"
    DECLINED = "DECLINED"
    ERROR = "ERROR"
    CANCELLED = "CANCELLED"
