"""Transfer models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping

from akahu_types.exceptions import ValidationError
from akahu_types.identifiers import AccountId, TransferId
from akahu_types.models.base import parse_amount, parse_timestamp, require
from akahu_types.models.enums import TransferStatus
from akahu_types.serialization import serialize_value


@dataclass
class Transfer:
    """A money movement between two accounts belonging to the same user."""

    id: TransferId
    sid: str
    status: TransferStatus
    from_account: AccountId
    to_account: AccountId
    amount: Decimal
    created_at: datetime
    updated_at: datetime
    final: bool
    status_text: str | None = None  # only for ERROR / DECLINED

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> Transfer:
        return cls(
            id=TransferId.from_trusted_source(require(payload, "_id", "Transfer")),
            sid=require(payload, "sid", "Transfer"),
            status=TransferStatus(require(payload, "status", "Transfer")),
            from_account=AccountId.from_trusted_source(require(payload, "from", "Transfer")),
            to_account=AccountId.from_trusted_source(require(payload, "to", "Transfer")),
            amount=parse_amount(require(payload, "amount", "Transfer")),
            created_at=parse_timestamp(require(payload, "created_at", "Transfer")),
            updated_at=parse_timestamp(require(payload, "updated_at", "Transfer")),
            final=bool(payload.get("final", False)),
            status_text=payload.get("status_text"),
        )


@dataclass
class TransferRequest:
    """Request body for creating a transfer."""

    from_account: AccountId
    to_account: AccountId
    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount <= 0:
            raise ValidationError(f"Transfer amount must be positive, got {self.amount}")

    @classmethod
    def from_user_input(cls, from_account: str, to_account: str, amount: Decimal | str) -> TransferRequest:
        return cls(
            from_account=AccountId.from_user_input(from_account),
            to_account=AccountId.from_user_input(to_account),
            amount=parse_amount(amount),
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "from": serialize_value(self.from_account),
            "to": serialize_value(self.to_account),
            "amount": serialize_value(self.amount),
        }
