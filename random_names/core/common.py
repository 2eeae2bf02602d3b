"""
Common definitions and utilities shared across core modules.
"""

from enum import Enum
from typing import Any, Optional, Protocol, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, model_serializer, model_validator

T = TypeVar("T")


class RandomSource(Protocol):
    """
    Anything that can pick from a sequence and draw an integer.

    ``random.Random`` and ``random.SystemRandom`` both qualify; pass a seeded
    ``random.Random`` for reproducible names.
    """

    def choice(self, seq: Sequence[T]) -> T:
        ...

    def randint(self, a: int, b: int) -> int:
        ...


class SeparatorKind(str, Enum):
    """Kind of separator placed between name components"""
    DASH = "dash"
    UNDERSCORE = "underscore"
    CUSTOM = "custom"
    NONE = "none"


_LITERALS = {
    SeparatorKind.DASH: "-",
    SeparatorKind.UNDERSCORE: "_",
    SeparatorKind.NONE: "",
}


class Separator(BaseModel):
    """
    A literal string inserted between words, or between a name and its number.

    A separator is written out as the literal it renders to. Reading ``"-"``,
    ``"_"`` or ``""`` gives back the dash, underscore and empty separators;
    any other string becomes a custom separator.
    """
    model_config = ConfigDict(frozen=True)

    kind: SeparatorKind = SeparatorKind.DASH
    value: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def parse_literal(cls, data: Any) -> Any:
        if isinstance(data, str):
            for kind, literal in _LITERALS.items():
                if data == literal:
                    return {"kind": kind}
            return {"kind": SeparatorKind.CUSTOM, "value": data}
        if isinstance(data, dict) and data.get("kind") == SeparatorKind.CUSTOM:
            # Custom values that spell a named literal collapse to that kind.
            for kind, literal in _LITERALS.items():
                if data.get("value") == literal:
                    return {"kind": kind}
        return data

    @model_validator(mode="after")
    def check_value(self) -> "Separator":
        if self.kind == SeparatorKind.CUSTOM:
            if self.value is None:
                raise ValueError("a custom separator needs a value")
        elif self.value is not None:
            raise ValueError(f"a {self.kind.value} separator does not take a value")
        return self

    @model_serializer
    def serialize_literal(self) -> str:
        return str(self)

    @classmethod
    def parse(cls, literal: str) -> "Separator":
        return cls.model_validate(literal)

    @classmethod
    def dash(cls) -> "Separator":
        return cls(kind=SeparatorKind.DASH)

    @classmethod
    def underscore(cls) -> "Separator":
        return cls(kind=SeparatorKind.UNDERSCORE)

    @classmethod
    def none(cls) -> "Separator":
        return cls(kind=SeparatorKind.NONE)

    @classmethod
    def custom(cls, value: str) -> "Separator":
        """Custom separator; ``"-"``, ``"_"`` and ``""`` collapse to the named kinds."""
        return cls.parse(value)

    def __str__(self) -> str:
        if self.kind == SeparatorKind.CUSTOM:
            return self.value
        return _LITERALS[self.kind]
