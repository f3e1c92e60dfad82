"""Base generator class for sample data generators."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all sample data generators.

    Provides common initialization: a Faker instance and a private
    ``random.Random`` so that generators seeded alike produce identical
    data without touching the global random state.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``ja_JP``).
    """

    def __init__(self, seed: int | None = None, locale: str = "ja_JP") -> None:
        self.fake = Faker(locale)
        self.random = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)
