"""
Generator module produces an endless stream of random names.
"""

import json
import logging
import random
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError

from .casing import Casing
from .common import RandomSource
from .errors import (
    AdjectivesEmptyError,
    InvalidConfigError,
    NounsEmptyError,
    RerollLimitError,
    UninitializedFieldError,
)
from .length import Length, LengthPolicy
from .naming import Naming
from .words import ADJECTIVES, NOUNS

logger = logging.getLogger("NameGenerator")

DEFAULT_MAX_REROLLS = 10_000


class GeneratorConfig(BaseModel):
    """Configuration for name generation"""
    adjectives: List[str] = Field(default_factory=lambda: list(ADJECTIVES))
    nouns: List[str] = Field(default_factory=lambda: list(NOUNS))
    naming: Naming = Field(default_factory=Naming)
    casing: Casing = Field(default_factory=Casing)
    length: Length = Field(default_factory=Length)
    # None lets a reroll run until it succeeds, however long that takes.
    max_rerolls: Optional[int] = Field(default=DEFAULT_MAX_REROLLS, ge=1)


class Generator:
    """
    A random name generator which combines an adjective, a noun, and an
    optional number.

    A generator is an infinite iterator: every ``next()`` draws a fresh
    adjective and noun, so repeats are possible. It is not thread-safe;
    give each consumer its own generator or guard it with a lock.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[RandomSource] = None
    ):
        """
        Initialize the generator.

        Args:
            config: Optional generation configuration, defaults to the
                built-in word lists and a plain lowercase dash name
            rng: Random source to draw from, defaults to a fresh
                ``random.Random`` seeded from the OS

        Raises:
            AdjectivesEmptyError: If the adjective list is empty
            NounsEmptyError: If the noun list is empty
        """
        if config is None:
            config = GeneratorConfig()
        if not config.adjectives:
            raise AdjectivesEmptyError()
        if not config.nouns:
            raise NounsEmptyError()

        self._adjectives: Tuple[str, ...] = tuple(config.adjectives)
        self._nouns: Tuple[str, ...] = tuple(config.nouns)
        self._naming = config.naming
        self._casing = config.casing
        self._length = config.length
        self._max_rerolls = config.max_rerolls
        self.rng = rng if rng is not None else random.Random()

    @property
    def adjectives(self) -> Tuple[str, ...]:
        return self._adjectives

    @property
    def nouns(self) -> Tuple[str, ...]:
        return self._nouns

    @property
    def naming(self) -> Naming:
        return self._naming

    @property
    def casing(self) -> Casing:
        return self._casing

    @property
    def length(self) -> Length:
        return self._length

    @property
    def max_rerolls(self) -> Optional[int]:
        return self._max_rerolls

    @property
    def config(self) -> GeneratorConfig:
        """A fresh copy of the configuration, without the random source"""
        return GeneratorConfig(
            adjectives=list(self._adjectives),
            nouns=list(self._nouns),
            naming=self._naming,
            casing=self._casing,
            length=self._length,
            max_rerolls=self._max_rerolls,
        )

    def __iter__(self) -> "Generator":
        return self

    def __next__(self) -> str:
        if not self._adjectives or not self._nouns:
            raise StopIteration

        name = self._generate_once()
        if self._length.policy != LengthPolicy.REROLL:
            return self._length.apply(name)

        attempts = 1
        while not self._length.accepts(name):
            if self._max_rerolls is not None and attempts >= self._max_rerolls:
                logger.warning(
                    f"Giving up on length {self._length.limit} after {attempts} attempts"
                )
                raise RerollLimitError(self._length.limit, attempts)
            name = self._generate_once()
            attempts += 1

        if attempts > 1:
            logger.debug(f"Rerolled {attempts - 1} times to reach length {self._length.limit}")
        return name

    def _generate_once(self) -> str:
        adjective = self.rng.choice(self._adjectives)
        noun = self.rng.choice(self._nouns)
        combined = self._casing.apply([adjective, noun])
        return self._naming.apply(combined, self.rng)

    def take(self, amount: int) -> List[str]:
        """
        Generate several names at once.

        Args:
            amount: Number of names to generate

        Returns:
            List of generated names
        """
        return [next(self) for _ in range(amount)]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the configuration; the random source is not included."""
        return self.config.model_dump(mode="json")

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], rng: Optional[RandomSource] = None) -> "Generator":
        """
        Build a generator from a configuration mapping.

        Missing keys take their defaults and unknown keys are ignored.

        Args:
            data: Mapping with any of the keys adjectives, nouns, naming,
                casing, length and max_rerolls
            rng: Optional random source for the new generator

        Returns:
            A ready to use Generator
        """
        return GeneratorBuilder.from_dict(data).rng(rng).build()

    @classmethod
    def from_json(cls, text: str, rng: Optional[RandomSource] = None) -> "Generator":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidConfigError(f"invalid JSON: {e}") from e
        return cls.from_dict(data, rng=rng)

    def __repr__(self) -> str:
        return (
            f"Generator(adjectives={len(self._adjectives)} words, "
            f"nouns={len(self._nouns)} words, naming={self._naming!r}, "
            f"casing={self._casing!r}, length={self._length!r})"
        )


class GeneratorBuilder:
    """
    Assembles a validated Generator from optional overrides.

    Every setter returns the builder, so calls can be chained::

        generator = (
            GeneratorBuilder()
            .naming(Naming.numbered(4))
            .rng(random.Random(7))
            .build()
        )
    """

    FIELDS = ("adjectives", "nouns", "naming", "casing", "length", "max_rerolls")
    # max_rerolls=None is a meaningful value (no limit), not a missing one.
    REQUIRED_FIELDS = ("adjectives", "nouns", "naming", "casing", "length")

    def __init__(self):
        self._values: Dict[str, Any] = {}
        self._rng: Optional[RandomSource] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GeneratorBuilder":
        if not isinstance(data, Mapping):
            raise InvalidConfigError(
                f"expected a mapping of settings, got {type(data).__name__}"
            )
        builder = cls()
        for key in cls.FIELDS:
            if key in data:
                builder._values[key] = data[key]
        ignored = sorted(set(data) - set(cls.FIELDS))
        if ignored:
            logger.debug(f"Ignoring unknown config keys: {ignored}")
        return builder

    def adjectives(self, words: Optional[Iterable[str]]) -> "GeneratorBuilder":
        self._values["adjectives"] = None if words is None else list(words)
        return self

    def nouns(self, words: Optional[Iterable[str]]) -> "GeneratorBuilder":
        self._values["nouns"] = None if words is None else list(words)
        return self

    def naming(self, naming: Optional[Naming]) -> "GeneratorBuilder":
        self._values["naming"] = naming
        return self

    def casing(self, casing: Optional[Casing]) -> "GeneratorBuilder":
        self._values["casing"] = casing
        return self

    def length(self, length: Optional[Length]) -> "GeneratorBuilder":
        self._values["length"] = length
        return self

    def max_rerolls(self, attempts: Optional[int]) -> "GeneratorBuilder":
        self._values["max_rerolls"] = attempts
        return self

    def rng(self, rng: Optional[RandomSource]) -> "GeneratorBuilder":
        self._rng = rng
        return self

    def validate(self) -> None:
        """
        Check the collected settings.

        Raises:
            AdjectivesEmptyError: If an empty adjective list was supplied
            NounsEmptyError: If an empty noun list was supplied
            UninitializedFieldError: If a required field was set to None
        """
        if _is_empty(self._values.get("adjectives")):
            raise AdjectivesEmptyError()
        if _is_empty(self._values.get("nouns")):
            raise NounsEmptyError()
        for field in self.REQUIRED_FIELDS:
            if field in self._values and self._values[field] is None:
                raise UninitializedFieldError(field)

    def build(self) -> Generator:
        """
        Validate the settings and create the generator.

        Returns:
            A ready to use Generator

        Raises:
            ConfigurationError: If the settings are invalid
        """
        self.validate()
        try:
            config = GeneratorConfig(**self._values)
        except ValidationError as e:
            raise InvalidConfigError(str(e)) from e

        logger.debug(
            f"Building generator with {len(config.adjectives)} adjectives, "
            f"{len(config.nouns)} nouns"
        )
        return Generator(config, rng=self._rng)


def _is_empty(words: Any) -> bool:
    # Non-sequence values are left for GeneratorConfig to reject.
    return isinstance(words, (list, tuple)) and len(words) == 0
