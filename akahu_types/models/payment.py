"""Payment models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping

from akahu_types.account_number import BankAccountNumber
from akahu_types.exceptions import ValidationError
from akahu_types.identifiers import AccountId, PaymentId
from akahu_types.models.base import parse_amount, parse_timestamp, require
from akahu_types.models.enums import PaymentStatus
from akahu_types.serialization import serialize_value


@dataclass
class PaymentDestination:
    """Destination of a payment: any NZ bank account."""

    account_number: BankAccountNumber
    name: str

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> PaymentDestination:
        return cls(
            account_number=BankAccountNumber.parse(
                require(payload, "account_number", "PaymentDestination")
            ),
            name=require(payload, "name", "PaymentDestination"),
        )

    def to_payload(self) -> dict[str, Any]:
        return {"account_number": serialize_value(self.account_number), "name": self.name}


@dataclass
class Payment:
    """A payment from a connected account to another NZ bank account."""

    id: PaymentId
    sid: str
    status: PaymentStatus
    from_account: AccountId
    to: PaymentDestination
    amount: Decimal
    created_at: datetime
    updated_at: datetime
    final: bool
    status_code: str | None = None
    status_text: str | None = None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> Payment:
        """Build from a ``/payments`` response item.

        The destination account number is re-validated even though it came
        from the server; it is what money is sent to.
        """
        return cls(
            id=PaymentId.from_trusted_source(require(payload, "_id", "Payment")),
            sid=require(payload, "sid", "Payment"),
            status=PaymentStatus(require(payload, "status", "Payment")),
            from_account=AccountId.from_trusted_source(require(payload, "from", "Payment")),
            to=PaymentDestination.from_api(require(payload, "to", "Payment")),
            amount=parse_amount(require(payload, "amount", "Payment")),
            created_at=parse_timestamp(require(payload, "created_at", "Payment")),
            updated_at=parse_timestamp(require(payload, "updated_at", "Payment")),
            final=bool(payload.get("final", False)),
            status_code=payload.get("status_code"),
            status_text=payload.get("status_text"),
        )


@dataclass
class PaymentRequest:
    """Request body for creating a payment."""

    from_account: AccountId
    to: PaymentDestination
    amount: Decimal

    def __post_init__(self) -> None:
        if self.amount <= 0:
            raise ValidationError(f"Payment amount must be positive, got {self.amount}")

    @classmethod
    def from_user_input(
        cls,
        from_account: str,
        to_account_number: str,
        to_name: str,
        amount: Decimal | str,
    ) -> PaymentRequest:
        """Validate command-line or form input for a new payment.

        Raises
        ------
        InvalidIdentifierError
            If ``from_account`` is not an account identifier.
        InvalidAccountNumberError
            If ``to_account_number`` is not a valid NZ bank account number.
        """
        return cls(
            from_account=AccountId.from_user_input(from_account),
            to=PaymentDestination(
                account_number=BankAccountNumber.parse(to_account_number),
                name=to_name,
            ),
            amount=parse_amount(amount),
        )

    def to_payload(self) -> dict[str, Any]:
        return {
            "from": serialize_value(self.from_account),
            "to": self.to.to_payload(),
            "amount": serialize_value(self.amount),
        }
