"""Base generator class for all synthetic value generators."""

from __future__ import annotations

from abc import ABC

from faker import Faker

from akahu_types.config import GeneratorConfig


class BaseGenerator(ABC):
    """Base class for all generators.

    Provides a Faker instance and seed-based reproducibility. Generators draw
    all randomness from ``self.fake`` so two generators built with the same
    seed produce the same sequence.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_NZ``).
    """

    def __init__(self, seed: int | None = None, locale: str = "en_NZ") -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> BaseGenerator:
        return cls(seed=config.seed, locale=config.locale)
