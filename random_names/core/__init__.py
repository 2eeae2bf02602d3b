"""
Core building blocks of the name generator
"""

from .casing import Casing, CasingStyle
from .common import RandomSource, Separator, SeparatorKind
from .errors import (
    AdjectivesEmptyError,
    ConfigurationError,
    InvalidConfigError,
    NamesError,
    NounsEmptyError,
    RerollLimitError,
    UninitializedFieldError,
)
from .generator import Generator, GeneratorBuilder, GeneratorConfig
from .length import Length, LengthPolicy
from .naming import Naming, NamingStrategy
from .words import ADJECTIVES, NOUNS

__all__ = [
    "ADJECTIVES",
    "NOUNS",
    "Casing",
    "CasingStyle",
    "RandomSource",
    "Separator",
    "SeparatorKind",
    "Generator",
    "GeneratorBuilder",
    "GeneratorConfig",
    "Length",
    "LengthPolicy",
    "Naming",
    "NamingStrategy",
    "NamesError",
    "ConfigurationError",
    "UninitializedFieldError",
    "InvalidConfigError",
    "AdjectivesEmptyError",
    "NounsEmptyError",
    "RerollLimitError",
]
