"""Prefix-tagged resource identifiers.

Every resource returned by the Akahu API carries an opaque identifier whose
kind is visible from a literal prefix (``acc_``, ``trans_`` and so on). Each
kind is a subclass of :class:`ValidatedIdentifier` that only declares its
prefix; construction and validation live once, in the base class.

There are two ways to build an identifier, and they are deliberately
separate:

- ``Kind.from_user_input(text)`` (or ``Kind(text)``) checks the prefix and
  raises :class:`~akahu_types.exceptions.InvalidIdentifierError`. Use it for
  anything typed by a person or passed on a command line.
- ``Kind.from_trusted_source(text)`` stores the text as-is. Use it only for
  values read straight out of an API response, where the server guarantees
  the prefix.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, TypeVar, Union

from akahu_types.exceptions import InvalidIdentifierError, UnknownIdentifierKindError

T = TypeVar("T", bound="ValidatedIdentifier")


class IdentifierKind(str, Enum):
    ACCOUNT = "account"
    TRANSACTION = "transaction"
    USER = "user"
    TRANSFER = "transfer"
    PAYMENT = "payment"
    CONNECTION = "connection"
    CATEGORY = "category"
    MERCHANT = "merchant"
    AUTHORIZATION = "authorization"


_REGISTRY: dict[IdentifierKind, type["ValidatedIdentifier"]] = {}


class ValidatedIdentifier:
    """Base class for all prefix-tagged identifiers.

    Concrete kinds are declared with class keywords::

        class AccountId(ValidatedIdentifier, kind=IdentifierKind.ACCOUNT, prefix="acc_"):
            __slots__ = ()

    Identifiers are immutable and hashable. Two identifiers are equal only if
    they are the same kind and hold the same text.
    """

    __slots__ = ("_value",)

    KIND: ClassVar[IdentifierKind]
    PREFIX: ClassVar[str]

    def __init_subclass__(
        cls,
        kind: IdentifierKind | str | None = None,
        prefix: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if kind is None or not prefix:
            raise TypeError(f"{cls.__name__} must declare both kind= and prefix=")
        cls.KIND = IdentifierKind(kind)
        cls.PREFIX = prefix
        if cls.KIND in _REGISTRY:
            raise TypeError(f"Identifier kind {cls.KIND.value!r} is already registered")
        _REGISTRY[cls.KIND] = cls

    def __new__(cls, *args: Any, **kwargs: Any) -> ValidatedIdentifier:
        if cls is ValidatedIdentifier:
            raise TypeError("ValidatedIdentifier cannot be instantiated; use a concrete kind")
        return super().__new__(cls)

    def __init__(self, text: str) -> None:
        if not isinstance(text, str) or not text.startswith(self.PREFIX):
            raise InvalidIdentifierError(self.KIND.value, self.PREFIX, str(text))
        object.__setattr__(self, "_value", text)

    @classmethod
    def from_user_input(cls: type[T], text: str) -> T:
        """Build from untrusted text, rejecting it if the prefix is missing.

        Raises
        ------
        InvalidIdentifierError
            If ``text`` does not start with ``cls.PREFIX``.
        """
        return cls(text)

    @classmethod
    def from_trusted_source(cls: type[T], text: str) -> T:
        """Build from a value the API server returned, without checking the prefix.

        Never call this with user-supplied text; use :meth:`from_user_input`.
        """
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_value", text)
        return instance

    @property
    def value(self) -> str:
        return self._value

    @property
    def kind(self) -> IdentifierKind:
        return self.KIND

    @property
    def prefix(self) -> str:
        return self.PREFIX

    @property
    def unprefixed(self) -> str:
        """The text after the kind prefix."""
        return self._value[len(self.PREFIX):]

    def as_str(self) -> str:
        return self._value

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self._value}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidatedIdentifier):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.KIND, self._value))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, tuple[str]]:
        return (type(self).from_trusted_source, (self._value,))


class AccountId(ValidatedIdentifier, kind=IdentifierKind.ACCOUNT, prefix="acc_"):
    """A connected bank account."""

    __slots__ = ()


class TransactionId(ValidatedIdentifier, kind=IdentifierKind.TRANSACTION, prefix="trans_"):
    __slots__ = ()


class UserId(ValidatedIdentifier, kind=IdentifierKind.USER, prefix="user_"):
    """A user who has authorized the application."""

    __slots__ = ()


class TransferId(ValidatedIdentifier, kind=IdentifierKind.TRANSFER, prefix="transfer_"):
    """A transfer between two of the same user's accounts."""

    __slots__ = ()


class PaymentId(ValidatedIdentifier, kind=IdentifierKind.PAYMENT, prefix="payment_"):
    __slots__ = ()


class ConnectionId(ValidatedIdentifier, kind=IdentifierKind.CONNECTION, prefix="conn_"):
    """A financial institution connection."""

    __slots__ = ()


class CategoryId(ValidatedIdentifier, kind=IdentifierKind.CATEGORY, prefix="cat_"):
    """An NZFCC category."""

    __slots__ = ()


class MerchantId(ValidatedIdentifier, kind=IdentifierKind.MERCHANT, prefix="_merchant"):
    __slots__ = ()


class AuthorizationId(ValidatedIdentifier, kind=IdentifierKind.AUTHORIZATION, prefix="auth_"):
    """An OAuth authorization, shared by all accounts connected in one login."""

    __slots__ = ()


KindLike = Union[IdentifierKind, str, type[ValidatedIdentifier]]


def identifier_type(kind: KindLike) -> type[ValidatedIdentifier]:
    """Return the identifier class for a kind name, enum member or class.

    Raises
    ------
    UnknownIdentifierKindError
        If ``kind`` does not name a registered identifier kind.
    """
    if isinstance(kind, type) and issubclass(kind, ValidatedIdentifier):
        if kind is ValidatedIdentifier:
            raise UnknownIdentifierKindError("ValidatedIdentifier is not a concrete kind")
        return kind
    try:
        return _REGISTRY[IdentifierKind(kind)]
    except (ValueError, KeyError):
        raise UnknownIdentifierKindError(f"Unknown identifier kind: {kind!r}") from None


def identifier_types() -> tuple[type[ValidatedIdentifier], ...]:
    return tuple(_REGISTRY[kind] for kind in IdentifierKind)


def from_user_input(kind: KindLike, text: str) -> ValidatedIdentifier:
    """Validate untrusted ``text`` as an identifier of ``kind``."""
    return identifier_type(kind).from_user_input(text)


def from_trusted_source(kind: KindLike, text: str) -> ValidatedIdentifier:
    """Wrap server-supplied ``text`` as an identifier of ``kind`` without checking it."""
    return identifier_type(kind).from_trusted_source(text)
