"""Synthetic resource identifiers."""

from __future__ import annotations

import string
from typing import Iterator

from akahu_types.config import GeneratorConfig
from akahu_types.generators.base import BaseGenerator
from akahu_types.identifiers import KindLike, ValidatedIdentifier, identifier_type
from akahu_types.logging import get_logger

logger = get_logger(__name__)


class IdentifierGenerator(BaseGenerator):
    """Generate identifiers shaped like the ones the API returns.

    Each identifier is the kind prefix followed by ``length`` lowercase
    alphanumeric characters.
    """

    ALPHABET = string.ascii_lowercase + string.digits

    def __init__(self, seed: int | None = None, locale: str = "en_NZ", length: int = 24) -> None:
        super().__init__(seed, locale)
        self.length = length

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> IdentifierGenerator:
        return cls(seed=config.seed, locale=config.locale, length=config.identifier_length)

    def generate(self, kind: KindLike) -> ValidatedIdentifier:
        id_type = identifier_type(kind)
        body = self.fake.lexify("?" * self.length, letters=self.ALPHABET)
        return id_type.from_user_input(id_type.PREFIX + body)

    def generate_batch(self, kind: KindLike, count: int) -> Iterator[ValidatedIdentifier]:
        id_type = identifier_type(kind)
        logger.debug("Generating %d %s identifiers", count, id_type.KIND.value)
        for _ in range(count):
            yield self.generate(id_type)
