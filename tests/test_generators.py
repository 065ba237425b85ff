"""Tests for synthetic value generators."""

import pytest

from akahu_types.account_number import BankAccountNumber
from akahu_types.banks import BankPrefix
from akahu_types.config import GeneratorConfig
from akahu_types.exceptions import UnknownIdentifierKindError
from akahu_types.generators import BankAccountNumberGenerator, IdentifierGenerator
from akahu_types.identifiers import AccountId, IdentifierKind, MerchantId, TransactionId


class TestBankAccountNumberGenerator:
    """Tests for BankAccountNumberGenerator."""

    def test_generate(self, seed: int) -> None:
        gen = BankAccountNumberGenerator(seed=seed)
        number = gen.generate()

        assert isinstance(number, BankAccountNumber)
        assert number.prefix in BankPrefix

    def test_generate_fixed_bank(self, seed: int) -> None:
        gen = BankAccountNumberGenerator(seed=seed)
        numbers = list(gen.generate_batch(20, bank=BankPrefix.KIWIBANK))

        assert len(numbers) == 20
        assert all(n.bank_code == "38" for n in numbers)

    def test_raw_contiguous_parses(self, seed: int) -> None:
        gen = BankAccountNumberGenerator(seed=seed)
        for _ in range(50):
            raw = gen.generate_raw()
            assert len(raw) == 16
            assert raw.isdigit()
            assert BankAccountNumber.is_valid(raw)

    def test_raw_hyphenated_is_canonical(self, seed: int) -> None:
        gen = BankAccountNumberGenerator(seed=seed)
        raw = gen.generate_raw(BankPrefix.ASB, hyphenated=True)
        assert str(BankAccountNumber.parse(raw)) == raw

    def test_reproducible(self, seed: int) -> None:
        first = list(BankAccountNumberGenerator(seed=seed).generate_batch(10))
        second = list(BankAccountNumberGenerator(seed=seed).generate_batch(10))
        assert first == second


class TestIdentifierGenerator:
    """Tests for IdentifierGenerator."""

    @pytest.mark.parametrize("kind", list(IdentifierKind))
    def test_generate_every_kind(self, kind: IdentifierKind, seed: int) -> None:
        gen = IdentifierGenerator(seed=seed)
        identifier = gen.generate(kind)

        assert identifier.kind is kind
        assert identifier.as_str().startswith(identifier.PREFIX)
        assert len(identifier.unprefixed) == 24

    def test_body_alphabet(self, seed: int) -> None:
        gen = IdentifierGenerator(seed=seed, length=40)
        body = gen.generate(MerchantId).unprefixed
        assert len(body) == 40
        assert set(body) <= set(IdentifierGenerator.ALPHABET)

    def test_batch_is_unique(self, seed: int) -> None:
        ids = list(IdentifierGenerator(seed=seed).generate_batch("transaction", 100))
        assert all(isinstance(i, TransactionId) for i in ids)
        assert len(set(ids)) == 100

    def test_from_config(self) -> None:
        gen = IdentifierGenerator.from_config(GeneratorConfig(seed=7, identifier_length=8))
        assert gen.length == 8
        assert len(gen.generate("account").unprefixed) == 8

    def test_reproducible(self, seed: int) -> None:
        first = IdentifierGenerator(seed=seed).generate(AccountId)
        second = IdentifierGenerator(seed=seed).generate(AccountId)
        assert first == second

    def test_unknown_kind(self, seed: int) -> None:
        with pytest.raises(UnknownIdentifierKindError):
            IdentifierGenerator(seed=seed).generate("widget")
