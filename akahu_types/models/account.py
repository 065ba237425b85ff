"""Account model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from akahu_types.account_number import BankAccountNumber
from akahu_types.identifiers import AccountId, AuthorizationId
from akahu_types.logging import get_logger
from akahu_types.models.base import require
from akahu_types.models.enums import AccountStatus, BankAccountKind

logger = get_logger(__name__)


@dataclass
class Account:
    """A connected account: anything with a balance.

    ``formatted_account`` holds a :class:`BankAccountNumber` for NZ bank
    accounts. Credit cards come back redacted (``1234-****-****-1234``) and
    are kept as the raw string; KiwiSaver and investment accounts have none.
    """

    id: AccountId
    authorisation: AuthorizationId
    name: str
    status: AccountStatus
    type: BankAccountKind
    formatted_account: BankAccountNumber | str | None = None
    migrated: str | None = None
    attributes: list[str] = field(default_factory=list)

    @property
    def bank_account_number(self) -> BankAccountNumber | None:
        if isinstance(self.formatted_account, BankAccountNumber):
            return self.formatted_account
        return None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> Account:
        """Build from an ``/accounts`` response item."""
        account_id = AccountId.from_trusted_source(require(payload, "_id", "Account"))

        formatted: BankAccountNumber | str | None = payload.get("formatted_account")
        if isinstance(formatted, str) and BankAccountNumber.is_valid(formatted):
            formatted = BankAccountNumber.parse(formatted)
        elif formatted is not None:
            logger.debug("Account %s has non-bank formatted_account", account_id)

        return cls(
            id=account_id,
            authorisation=AuthorizationId.from_trusted_source(
                require(payload, "_authorisation", "Account")
            ),
            name=require(payload, "name", "Account"),
            status=AccountStatus(require(payload, "status", "Account")),
            type=BankAccountKind(require(payload, "type", "Account")),
            formatted_account=formatted,
            migrated=payload.get("_migrated"),
            attributes=list(payload.get("attributes", [])),
        )
