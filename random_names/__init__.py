"""
Random Names - A random name generator with results like "delirious-pail"
"""

from random_names.core import (
    ADJECTIVES,
    NOUNS,
    Casing,
    CasingStyle,
    Generator,
    GeneratorBuilder,
    GeneratorConfig,
    Length,
    LengthPolicy,
    Naming,
    NamingStrategy,
    NamesError,
    Separator,
)
from random_names.utils import generate_names, generate_unique_name

__version__ = "0.1.0"

__all__ = [
    "ADJECTIVES",
    "NOUNS",
    "Casing",
    "CasingStyle",
    "Generator",
    "GeneratorBuilder",
    "GeneratorConfig",
    "Length",
    "LengthPolicy",
    "Naming",
    "NamingStrategy",
    "NamesError",
    "Separator",
    "generate_names",
    "generate_unique_name",
]
