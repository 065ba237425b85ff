"""New Zealand bank account number parsing and canonicalization.

An NZ bank account number has four fixed-width fields::

    BB-CCCC-NNNNNNN-SSS
    |  |    |       +-- suffix (3 digits)
    |  |    +---------- account base number (7 digits)
    |  +--------------- branch (4 digits)
    +------------------ bank prefix (2 digits, see ``akahu_types.banks``)

Input is accepted either hyphenated or as one contiguous run of 16 digits.
Either way the value is stored only in the hyphenated canonical form, and
every accessor is a fixed slice of that string.
"""

from __future__ import annotations

from functools import total_ordering
from typing import Any

from akahu_types.banks import BankIdentity, BankPrefix
from akahu_types.exceptions import InvalidAccountNumberError

FIELD_WIDTHS: tuple[int, ...] = (2, 4, 7, 3)
SEPARATOR = "-"
CONTIGUOUS_LENGTH = sum(FIELD_WIDTHS)
CANONICAL_LENGTH = CONTIGUOUS_LENGTH + len(SEPARATOR) * (len(FIELD_WIDTHS) - 1)


def _field_slices(gap: int) -> tuple[slice, ...]:
    """Slices for each field when fields are separated by ``gap`` characters."""
    slices = []
    start = 0
    for width in FIELD_WIDTHS:
        slices.append(slice(start, start + width))
        start += width + gap
    return tuple(slices)


_CONTIGUOUS_SLICES = _field_slices(0)
_CANONICAL_SLICES = _field_slices(len(SEPARATOR))
_BANK, _BRANCH, _ACCOUNT, _SUFFIX = _CANONICAL_SLICES


def _is_ascii_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()


def _split_fields(text: str) -> tuple[str, ...] | None:
    """Split ``text`` into validated fields, or return ``None`` if malformed."""
    if SEPARATOR in text:
        fields = tuple(text.split(SEPARATOR))
    elif len(text) == CONTIGUOUS_LENGTH:
        fields = tuple(text[s] for s in _CONTIGUOUS_SLICES)
    else:
        return None

    if len(fields) != len(FIELD_WIDTHS):
        return None
    for field, width in zip(fields, FIELD_WIDTHS):
        if len(field) != width or not _is_ascii_digits(field):
            return None
    if BankPrefix.from_code(fields[0]) is None:
        return None
    return fields


def canonicalize(text: str) -> str:
    """Return the canonical hyphenated form of ``text``.

    Raises
    ------
    InvalidAccountNumberError
        If ``text`` is not a structurally valid account number with a known
        bank prefix.
    """
    if not isinstance(text, str):
        raise InvalidAccountNumberError(str(text))
    fields = _split_fields(text)
    if fields is None:
        raise InvalidAccountNumberError(text)
    return SEPARATOR.join(fields)


@total_ordering
class BankAccountNumber:
    """A validated New Zealand bank account number.

    Construct with ``BankAccountNumber(text)`` or ``BankAccountNumber.parse(text)``;
    both validate. There is no unchecked constructor: a stored value is
    always in canonical ``BB-CCCC-NNNNNNN-SSS`` form.

    Examples
    --------
    >>> number = BankAccountNumber.parse("3890000000000123")
    >>> str(number)
    '38-9000-0000000-123'
    >>> number.bank_name
    'Kiwibank'
    """

    __slots__ = ("_value",)

    def __init__(self, text: str) -> None:
        object.__setattr__(self, "_value", canonicalize(text))

    @classmethod
    def parse(cls, text: str) -> BankAccountNumber:
        """Parse hyphenated or contiguous input into a canonical account number."""
        return cls(text)

    @classmethod
    def from_parts(cls, bank: str, branch: str, account: str, suffix: str) -> BankAccountNumber:
        """Build from separate fields. Each field must already be full width."""
        return cls(SEPARATOR.join((bank, branch, account, suffix)))

    @classmethod
    def is_valid(cls, text: Any) -> bool:
        """Return whether ``text`` would parse."""
        return isinstance(text, str) and _split_fields(text) is not None

    @property
    def bank_code(self) -> str:
        """Two-digit bank code (e.g. ``"01"``)."""
        return self._value[_BANK]

    @property
    def branch_code(self) -> str:
        """Four-digit branch code (e.g. ``"0123"``)."""
        return self._value[_BRANCH]

    @property
    def account_number(self) -> str:
        """Seven-digit account base number (e.g. ``"0012345"``)."""
        return self._value[_ACCOUNT]

    @property
    def suffix(self) -> str:
        """Three-digit suffix (e.g. ``"000"``)."""
        return self._value[_SUFFIX]

    @property
    def prefix(self) -> BankPrefix:
        return BankPrefix(int(self.bank_code))

    @property
    def bank_identity(self) -> BankIdentity:
        return self.prefix.identity

    @property
    def bank_name(self) -> str:
        return self.prefix.bank_name

    def components(self) -> tuple[str, str, str, str]:
        """Return ``(bank_code, branch_code, account_number, suffix)``."""
        return (self.bank_code, self.branch_code, self.account_number, self.suffix)

    def as_str(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self._value}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BankAccountNumber):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BankAccountNumber):
            return NotImplemented
        return self._value < other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type, tuple[str]]:
        return (type(self), (self._value,))
