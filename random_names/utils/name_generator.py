"""
Name generator utility for creating unique, memorable names in one call.
"""

from typing import List, Optional

from random_names.core import (
    Casing,
    CasingStyle,
    Generator,
    GeneratorBuilder,
    Naming,
    RandomSource,
    Separator,
)


def _build_generator(
    adjectives: Optional[List[str]],
    nouns: Optional[List[str]],
    separator: str,
    digits: Optional[int],
    rng: Optional[RandomSource]
) -> Generator:
    builder = GeneratorBuilder().casing(Casing.of(CasingStyle.LOWERCASE, Separator.parse(separator)))
    if adjectives is not None:
        builder.adjectives(adjectives)
    if nouns is not None:
        builder.nouns(nouns)
    if digits is not None:
        builder.naming(Naming.numbered(digits, Separator.parse(separator)))
    return builder.rng(rng).build()


def generate_unique_name(
    adjectives: Optional[List[str]] = None,
    nouns: Optional[List[str]] = None,
    separator: str = "-",
    digits: Optional[int] = None,
    rng: Optional[RandomSource] = None
) -> str:
    """
    Generate a unique, memorable name.

    Args:
        adjectives: Optional list of adjectives to use
        nouns: Optional list of nouns to use
        separator: Separator between words and before the number
        digits: Append a random number with this many digits
        rng: Optional random source, e.g. a seeded ``random.Random``

    Returns:
        A unique, memorable name
    """
    return next(_build_generator(adjectives, nouns, separator, digits, rng))


def generate_names(
    amount: int,
    adjectives: Optional[List[str]] = None,
    nouns: Optional[List[str]] = None,
    separator: str = "-",
    digits: Optional[int] = None,
    rng: Optional[RandomSource] = None
) -> List[str]:
    """Generate ``amount`` names sharing one generator."""
    return _build_generator(adjectives, nouns, separator, digits, rng).take(amount)
