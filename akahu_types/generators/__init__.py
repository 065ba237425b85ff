"""Synthetic value generators."""

from akahu_types.generators.account_number import BankAccountNumberGenerator
from akahu_types.generators.base import BaseGenerator
from akahu_types.generators.identifier import IdentifierGenerator

__all__ = [
    "BankAccountNumberGenerator",
    "BaseGenerator",
    "IdentifierGenerator",
]
