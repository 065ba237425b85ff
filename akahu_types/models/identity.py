"""Identity verification models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from akahu_types.account_number import BankAccountNumber
from akahu_types.models.base import require


@dataclass
class Identity:
    """Account holder name paired with a verified account number."""

    name: str
    formatted_account: BankAccountNumber

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> Identity:
        return cls(
            name=require(payload, "name", "Identity"),
            formatted_account=BankAccountNumber.parse(
                require(payload, "formatted_account", "Identity")
            ),
        )


@dataclass
class IdentityAccount:
    """Account details returned by an identity verification."""

    name: str  # nickname or product name, e.g. "Everyday"
    account_number: BankAccountNumber
    holder: str
    has_unlisted_holders: bool
    bank: str
    address: str | None = None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> IdentityAccount:
        return cls(
            name=require(payload, "name", "IdentityAccount"),
            account_number=BankAccountNumber.parse(
                require(payload, "account_number", "IdentityAccount")
            ),
            holder=require(payload, "holder", "IdentityAccount"),
            has_unlisted_holders=bool(payload.get("has_unlisted_holders", False)),
            bank=require(payload, "bank", "IdentityAccount"),
            address=payload.get("address"),
        )
