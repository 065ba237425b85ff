"""New Zealand bank prefix registry.

The first two digits of an NZ bank account number identify the issuing
institution. The set of known prefixes is closed: codes outside the table
below are treated as unknown and never guessed at.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class BankIdentity:
    """A known issuing institution for one bank prefix.

    Several prefixes share the same ``bank_name`` (e.g. 01, 04, 06, 11 and 25
    are all ANZ), so identities are keyed by ``numeric_code``, never by name.
    """

    numeric_code: int
    display_code: str  # always two digits, zero padded
    bank_name: str


class BankPrefix(int, Enum):
    """One member per legal two-digit bank prefix."""

    ANZ = 1
    BNZ = 2
    WESTPAC = 3
    ANZ_WISE = 4
    CHINA_CONSTRUCTION = 5
    ANZ_NATIONAL = 6
    NAB = 8
    ICBC = 10
    ANZ_POSTBANK = 11
    ASB = 12
    WESTPAC_TRUST = 13
    WESTPAC_OTAGO = 14
    TSB = 15
    WESTPAC_SOUTHLAND = 16
    WESTPAC_BAY_OF_PLENTY = 17
    WESTPAC_CANTERBURY = 18
    WESTPAC_WAIKATO = 19
    WESTPAC_WELLINGTON = 20
    WESTPAC_WESTLAND = 21
    WESTPAC_SOUTH_CANTERBURY = 22
    WESTPAC_AUCKLAND = 23
    ASB_PARTNER = 24
    ANZ_PARTNER = 25
    HSBC = 30
    CITIBANK = 31
    KIWIBANK = 38
    BANK_OF_CHINA = 88

    @classmethod
    def from_code(cls, code_text: str) -> "BankPrefix | None":
        """Look up a prefix from its textual code.

        Leading zeros are ignored, so ``"01"`` and ``"1"`` are the same code.
        Empty, all-zero and non-digit text is unknown.
        """
        if not isinstance(code_text, str) or not code_text.isascii() or not code_text.isdigit():
            return None
        numeric_part = code_text.lstrip("0")
        if not numeric_part:
            return None
        try:
            return cls(int(numeric_part))
        except ValueError:
            return None

    @property
    def display_code(self) -> str:
        """Two-digit zero-padded code, as embedded in account numbers."""
        return f"{self.value:02d}"

    @property
    def bank_name(self) -> str:
        """Common name of the institution (e.g. ``"ANZ"``, ``"Kiwibank"``)."""
        return bank_name(self)

    @property
    def identity(self) -> BankIdentity:
        return _IDENTITIES[self]


_BANK_NAMES: dict[BankPrefix, str] = {
    BankPrefix.ANZ: "ANZ",
    BankPrefix.ANZ_WISE: "ANZ",
    BankPrefix.ANZ_NATIONAL: "ANZ",
    BankPrefix.ANZ_POSTBANK: "ANZ",
    BankPrefix.ANZ_PARTNER: "ANZ",
    BankPrefix.BNZ: "Bank of New Zealand",
    BankPrefix.NAB: "Bank of New Zealand",
    BankPrefix.WESTPAC: "Westpac",
    BankPrefix.WESTPAC_TRUST: "Westpac",
    BankPrefix.WESTPAC_OTAGO: "Westpac",
    BankPrefix.WESTPAC_SOUTHLAND: "Westpac",
    BankPrefix.WESTPAC_BAY_OF_PLENTY: "Westpac",
    BankPrefix.WESTPAC_CANTERBURY: "Westpac",
    BankPrefix.WESTPAC_WAIKATO: "Westpac",
    BankPrefix.WESTPAC_WELLINGTON: "Westpac",
    BankPrefix.WESTPAC_WESTLAND: "Westpac",
    BankPrefix.WESTPAC_SOUTH_CANTERBURY: "Westpac",
    BankPrefix.WESTPAC_AUCKLAND: "Westpac",
    BankPrefix.ASB: "ASB",
    BankPrefix.ASB_PARTNER: "ASB",
    BankPrefix.CHINA_CONSTRUCTION: "China Construction Bank",
    BankPrefix.ICBC: "ICBC",
    BankPrefix.TSB: "TSB",
    BankPrefix.HSBC: "HSBC",
    BankPrefix.CITIBANK: "Citibank",
    BankPrefix.KIWIBANK: "Kiwibank",
    BankPrefix.BANK_OF_CHINA: "Bank of China",
}

_IDENTITIES: dict[BankPrefix, BankIdentity] = {
    prefix: BankIdentity(
        numeric_code=prefix.value,
        display_code=prefix.display_code,
        bank_name=_BANK_NAMES[prefix],
    )
    for prefix in BankPrefix
}


def bank_name(prefix: BankPrefix) -> str:
    """Return the display name shared by one or more prefixes."""
    return _BANK_NAMES[prefix]


def resolve(code_text: str) -> BankIdentity | None:
    """Resolve a bank code to its identity.

    Parameters
    ----------
    code_text : str
        Bank code, zero padded or not (``"01"`` and ``"1"`` are equivalent).

    Returns
    -------
    BankIdentity | None
        The matching identity, or ``None`` when the code is unknown.
    """
    prefix = BankPrefix.from_code(code_text)
    if prefix is None:
        return None
    return _IDENTITIES[prefix]


def all_banks() -> tuple[BankIdentity, ...]:
    """Return every known identity, ordered by numeric code."""
    return tuple(_IDENTITIES[prefix] for prefix in sorted(BankPrefix))
