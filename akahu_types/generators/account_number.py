"""Synthetic NZ bank account numbers."""

from __future__ import annotations

from typing import Iterator

from akahu_types.account_number import FIELD_WIDTHS, SEPARATOR, BankAccountNumber
from akahu_types.banks import BankPrefix
from akahu_types.generators.base import BaseGenerator
from akahu_types.logging import get_logger

logger = get_logger(__name__)


class BankAccountNumberGenerator(BaseGenerator):
    """Generate structurally valid account numbers across the known bank prefixes.

    Branch, account and suffix fields are uniformly random digits; no real
    branch ranges are modelled.
    """

    BANKS = list(BankPrefix)

    def generate(self, bank: BankPrefix | None = None) -> BankAccountNumber:
        """Generate one canonical account number.

        Parameters
        ----------
        bank : BankPrefix | None
            Fix the bank prefix; chosen at random when omitted.
        """
        return BankAccountNumber.parse(self.generate_raw(bank))

    def generate_raw(self, bank: BankPrefix | None = None, hyphenated: bool = False) -> str:
        """Generate raw input text, contiguous by default, as a user might type it."""
        if bank is None:
            bank = self.fake.random_element(self.BANKS)
        fields = [bank.display_code]
        fields.extend(self.fake.numerify("#" * width) for width in FIELD_WIDTHS[1:])
        separator = SEPARATOR if hyphenated else ""
        return separator.join(fields)

    def generate_batch(self, count: int, bank: BankPrefix | None = None) -> Iterator[BankAccountNumber]:
        logger.debug("Generating %d account numbers", count)
        for _ in range(count):
            yield self.generate(bank)
