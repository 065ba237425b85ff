"""Tests for serialization utilities."""

import json
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

from akahu_types.account_number import BankAccountNumber
from akahu_types.identifiers import AccountId, TransactionId
from akahu_types.models import PaymentDestination, Transaction
from akahu_types.serialization import dataclass_to_dict, serialize_value, to_dict, to_dict_fast


class _SampleEnum(str, Enum):
    VALUE_A = "VALUE_A"


@dataclass
class _SampleRecord:
    id: AccountId
    account_number: BankAccountNumber
    amount: Decimal
    created_at: datetime


def _record() -> _SampleRecord:
    return _SampleRecord(
        id=AccountId("acc_1"),
        account_number=BankAccountNumber("3890000000000123"),
        amount=Decimal("10.50"),
        created_at=datetime(2026, 1, 1),
    )


class TestSerializeValue:
    """Tests for serialize_value function."""

    def test_account_number_uses_canonical_form(self) -> None:
        assert serialize_value(BankAccountNumber("3890000000000123")) == "38-9000-0000000-123"

    def test_identifier(self) -> None:
        assert serialize_value(TransactionId("trans_9")) == "trans_9"

    def test_scalars(self) -> None:
        assert serialize_value(Decimal("99.99")) == "99.99"
        assert serialize_value(_SampleEnum.VALUE_A) == "VALUE_A"
        assert serialize_value(datetime(2024, 6, 15, 10, 30)) == "2024-06-15T10:30:00"
        assert serialize_value(date(2024, 6, 15)) == "2024-06-15"
        assert serialize_value(None) is None
        assert serialize_value(42) == 42

    def test_containers(self) -> None:
        value = {"ids": (AccountId("acc_1"), AccountId("acc_2")), "n": [Decimal("1")]}
        assert serialize_value(value) == {"ids": ["acc_1", "acc_2"], "n": ["1"]}


class TestToDict:
    def test_dataclass(self) -> None:
        result = to_dict(_record())
        assert result == {
            "id": "acc_1",
            "account_number": "38-9000-0000000-123",
            "amount": "10.50",
            "created_at": "2026-01-01T00:00:00",
        }

    def test_nested_dataclass(self) -> None:
        destination = PaymentDestination(BankAccountNumber("12-3456-7890123-001"), "Jane")
        assert dataclass_to_dict(destination) == {
            "account_number": "12-3456-7890123-001",
            "name": "Jane",
        }

    def test_transaction_with_enrichment(self) -> None:
        transaction = Transaction.from_api(
            {
                "_id": "trans_1",
                "_account": "acc_1",
                "_connection": "conn_1",
                "created_at": "2026-01-01T00:00:00Z",
                "date": "2026-01-01T00:00:00Z",
                "description": "INTEREST",
                "amount": "0.42",
                "type": "INTEREST",
                "merchant": {"_id": "_merchant_1", "name": "Bank"},
            }
        )
        result = to_dict(transaction)
        assert result["type"] == "INTEREST"
        assert result["amount"] == "0.42"
        assert result["merchant"] == {"id": "_merchant_1", "name": "Bank", "website": None}
        assert result["category"] is None
        assert json.loads(json.dumps(result))["connection"] == "conn_1"

    def test_fast_matches_full(self) -> None:
        assert to_dict_fast(_record()) == dataclass_to_dict(_record())

    def test_dict_passthrough(self) -> None:
        assert to_dict({"key": AccountId("acc_1")}) == {"key": "acc_1"}

    def test_other_types(self) -> None:
        assert to_dict(42) == {"value": "42"}
        assert to_dict(AccountId("acc_1")) == {"value": "acc_1"}

    def test_round_trip_through_json(self) -> None:
        original = _record()
        payload = json.loads(json.dumps(to_dict(original)))
        assert BankAccountNumber.parse(payload["account_number"]) == original.account_number
        assert AccountId.from_trusted_source(payload["id"]) == original.id
