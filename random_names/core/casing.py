"""
Casing module decides how the chosen words are letter-cased and joined.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, model_serializer, model_validator

from .common import Separator


class CasingStyle(str, Enum):
    """Casing styles; the values double as the serialized tags"""
    LOWERCASE = "Lowercase"
    UPPERCASE = "Uppercase"
    CAPITALIZE = "Capitalize"
    CAPITALIZE_FIRST = "CapitalizeFirst"
    CAPITALIZE_LAST = "CapitalizeLast"
    SNAKE_CASE = "SnakeCase"
    SCREAMING_SNAKE_CASE = "ScreamingSnakeCase"
    CAMEL_CASE = "CamelCase"
    PASCAL_CASE = "PascalCase"
    KEBAB_CASE = "KebabCase"
    SCREAMING_KEBAB_CASE = "ScreamingKebabCase"


# Styles that take their separator from configuration.
SEPARATED_STYLES = frozenset({
    CasingStyle.LOWERCASE,
    CasingStyle.UPPERCASE,
    CasingStyle.CAPITALIZE,
    CasingStyle.CAPITALIZE_FIRST,
    CasingStyle.CAPITALIZE_LAST,
})

FIXED_SEPARATORS: Dict[CasingStyle, str] = {
    CasingStyle.SNAKE_CASE: "_",
    CasingStyle.SCREAMING_SNAKE_CASE: "_",
    CasingStyle.CAMEL_CASE: "",
    CasingStyle.PASCAL_CASE: "",
    CasingStyle.KEBAB_CASE: "-",
    CasingStyle.SCREAMING_KEBAB_CASE: "-",
}

_TAGS = {style.value: style for style in CasingStyle}


def _lookup_style(value: Any) -> Optional[CasingStyle]:
    if isinstance(value, CasingStyle):
        return value
    if isinstance(value, str):
        return _TAGS.get(value)
    return None


def capitalize(word: str) -> str:
    """
    Upper-case the first character of a word and lower-case the rest.

    Unlike ``str.capitalize`` the first character goes through ``upper()``,
    so ``"ßig"`` becomes ``"SSig"``.
    """
    if not word:
        return word
    return word[0].upper() + word[1:].lower()


class Casing(BaseModel):
    """
    A casing style plus, for the separated styles, the separator to join with.

    Separated styles (Lowercase, Uppercase, Capitalize, CapitalizeFirst and
    CapitalizeLast) default to a dash. The remaining styles join with a fixed
    separator and reject an explicit one.
    """
    model_config = ConfigDict(frozen=True)

    style: CasingStyle = CasingStyle.LOWERCASE
    separator: Optional[Separator] = None

    @model_validator(mode="before")
    @classmethod
    def parse_tagged(cls, data: Any) -> Any:
        """Accept ``"CamelCase"`` and ``{"Lowercase": "-"}`` as well as field dicts"""
        if isinstance(data, str):
            data = {"style": data}
        elif isinstance(data, dict) and len(data) == 1:
            (tag, value), = data.items()
            if tag in _TAGS:
                data = {"style": tag, "separator": value}
        if isinstance(data, dict) and data.get("separator") is None:
            style = _lookup_style(data.get("style", CasingStyle.LOWERCASE))
            if style in SEPARATED_STYLES:
                data = {**data, "separator": Separator.dash()}
        return data

    @model_validator(mode="after")
    def check_separator(self) -> "Casing":
        if self.style not in SEPARATED_STYLES and self.separator is not None:
            raise ValueError(f"{self.style.value} does not take a separator")
        return self

    @model_serializer
    def serialize_tagged(self) -> Union[str, Dict[str, str]]:
        if self.style in SEPARATED_STYLES:
            return {self.style.value: str(self.separator)}
        return self.style.value

    @classmethod
    def of(cls, style: Union[CasingStyle, str], separator: Optional[Separator] = None) -> "Casing":
        return cls(style=style, separator=separator)

    def with_style(self, style: Union[CasingStyle, str]) -> "Casing":
        """Switch style, keeping the separator when both styles take one."""
        new_style = _lookup_style(style) or style
        if new_style in SEPARATED_STYLES and self.style in SEPARATED_STYLES:
            return Casing.of(new_style, self.separator)
        return Casing.of(new_style)

    def separator_literal(self) -> str:
        """The literal string this casing puts between words"""
        if self.style in SEPARATED_STYLES:
            return str(self.separator)
        return FIXED_SEPARATORS[self.style]

    def apply(self, words: Sequence[str]) -> str:
        """
        Case and join the given words.

        Args:
            words: Words to combine, usually an adjective and a noun

        Returns:
            The combined string
        """
        style = self.style
        joiner = self.separator_literal()

        if style in (CasingStyle.LOWERCASE, CasingStyle.SNAKE_CASE, CasingStyle.KEBAB_CASE):
            cased = [word.lower() for word in words]
        elif style in (
            CasingStyle.UPPERCASE,
            CasingStyle.SCREAMING_SNAKE_CASE,
            CasingStyle.SCREAMING_KEBAB_CASE,
        ):
            cased = [word.upper() for word in words]
        elif style in (CasingStyle.CAPITALIZE, CasingStyle.PASCAL_CASE):
            cased = [capitalize(word) for word in words]
        elif style == CasingStyle.CAPITALIZE_FIRST:
            cased = _capitalize_at(words, 0)
        elif style == CasingStyle.CAPITALIZE_LAST:
            cased = _capitalize_at(words, len(words) - 1)
        elif style == CasingStyle.CAMEL_CASE:
            cased = [
                word.lower() if i == 0 else capitalize(word)
                for i, word in enumerate(words)
            ]
        else:
            raise ValueError(f"Unsupported casing style: {style}")

        return joiner.join(cased)


def _capitalize_at(words: Sequence[str], index: int) -> List[str]:
    return [
        capitalize(word) if i == index else word.lower()
        for i, word in enumerate(words)
    ]
