"""Transaction models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping

from akahu_types.account_number import BankAccountNumber
from akahu_types.identifiers import AccountId, CategoryId, ConnectionId, MerchantId, TransactionId
from akahu_types.logging import get_logger
from akahu_types.models.base import parse_amount, parse_timestamp, require
from akahu_types.models.enums import TransactionKind

logger = get_logger(__name__)


@dataclass
class TransactionCategory:
    """NZFCC category attached by enrichment."""

    id: CategoryId
    name: str
    groups: dict[str, Any] = field(default_factory=dict)

    @property
    def personal_finance_group(self) -> str | None:
        group = self.groups.get("personal_finance")
        if isinstance(group, Mapping):
            return group.get("name")
        return None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> TransactionCategory:
        return cls(
            id=CategoryId.from_trusted_source(require(payload, "_id", "TransactionCategory")),
            name=require(payload, "name", "TransactionCategory"),
            groups=dict(payload.get("groups", {})),
        )


@dataclass
class TransactionMerchant:
    id: MerchantId
    name: str
    website: str | None = None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> TransactionMerchant:
        return cls(
            id=MerchantId.from_trusted_source(require(payload, "_id", "TransactionMerchant")),
            name=require(payload, "name", "TransactionMerchant"),
            website=payload.get("website"),
        )


@dataclass
class TransactionMeta:
    """Free-form details the bank supplied with the transaction.

    ``other_account`` is canonicalized when it is an NZ bank account number
    and kept as the raw string otherwise.
    """

    particulars: str | None = None
    code: str | None = None
    reference: str | None = None
    other_account: BankAccountNumber | str | None = None
    card_suffix: str | None = None
    logo: str | None = None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> TransactionMeta:
        other: BankAccountNumber | str | None = payload.get("other_account")
        if isinstance(other, str) and BankAccountNumber.is_valid(other):
            other = BankAccountNumber.parse(other)
        return cls(
            particulars=payload.get("particulars"),
            code=payload.get("code"),
            reference=payload.get("reference"),
            other_account=other,
            card_suffix=payload.get("card_suffix"),
            logo=payload.get("logo"),
        )


@dataclass
class Transaction:
    """A settled transaction on a connected account.

    ``category`` and ``merchant`` are only present when the app has access
    to enriched transaction data.
    """

    id: TransactionId
    account: AccountId
    connection: ConnectionId
    created_at: datetime
    date: datetime
    description: str
    amount: Decimal
    type: TransactionKind
    balance: Decimal | None = None
    category: TransactionCategory | None = None
    merchant: TransactionMerchant | None = None
    meta: TransactionMeta | None = None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> Transaction:
        """Build from a ``/transactions`` response item."""
        transaction_id = TransactionId.from_trusted_source(require(payload, "_id", "Transaction"))

        balance = payload.get("balance")
        category = payload.get("category")
        merchant = payload.get("merchant")
        meta = payload.get("meta")
        if category is None and merchant is None:
            logger.debug("Transaction %s has no enrichment data", transaction_id)

        return cls(
            id=transaction_id,
            account=AccountId.from_trusted_source(require(payload, "_account", "Transaction")),
            connection=ConnectionId.from_trusted_source(
                require(payload, "_connection", "Transaction")
            ),
            created_at=parse_timestamp(require(payload, "created_at", "Transaction")),
            date=parse_timestamp(require(payload, "date", "Transaction")),
            description=require(payload, "description", "Transaction"),
            amount=parse_amount(require(payload, "amount", "Transaction")),
            type=TransactionKind(require(payload, "type", "Transaction")),
            balance=parse_amount(balance) if balance is not None else None,
            category=TransactionCategory.from_api(category) if category is not None else None,
            merchant=TransactionMerchant.from_api(merchant) if merchant is not None else None,
            meta=TransactionMeta.from_api(meta) if meta is not None else None,
        )
