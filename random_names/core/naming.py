"""
Naming module appends an optional random number to a combined name.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, model_serializer, model_validator

from .common import RandomSource, Separator


class NamingStrategy(str, Enum):
    """Naming strategies; the values double as the serialized tags"""
    PLAIN = "Plain"
    NUMBERED = "Numbered"
    ZERO_PADDED_NUMBERED = "ZeroPaddedNumbered"


_NUMBERED = (NamingStrategy.NUMBERED, NamingStrategy.ZERO_PADDED_NUMBERED)


def generate_number(digits: int, rng: RandomSource) -> int:
    """
    Draw a number with exactly ``digits`` digits and no leading zero.

    Args:
        digits: Number of digits, at least 1
        rng: Random source to draw from

    Returns:
        An integer in ``[10**(digits - 1), 10**digits - 1]``
    """
    if digits < 1:
        raise ValueError(f"digits must be at least 1, got {digits}")
    return rng.randint(10 ** (digits - 1), 10 ** digits - 1)


def generate_padded_number(digits: int, rng: RandomSource) -> str:
    """Same draw as generate_number, rendered zero-padded to ``digits`` characters."""
    return f"{generate_number(digits, rng):0{digits}d}"


class Naming(BaseModel):
    """
    Whether, and how, a number is appended to the cased words.

    Examples of the three strategies with the default dash separator:
    ``"adjective-noun"``, ``"adjective-noun-1234"``, ``"adjective-noun-0042"``.
    """
    model_config = ConfigDict(frozen=True)

    strategy: NamingStrategy = NamingStrategy.PLAIN
    digits: Optional[int] = None
    separator: Optional[Separator] = None

    @model_validator(mode="before")
    @classmethod
    def parse_tagged(cls, data: Any) -> Any:
        """Accept ``"Plain"`` and ``{"Numbered": [4, "-"]}`` as well as field dicts"""
        if isinstance(data, str):
            return {"strategy": data}
        if isinstance(data, dict) and len(data) == 1:
            (tag, value), = data.items()
            if tag in (NamingStrategy.NUMBERED.value, NamingStrategy.ZERO_PADDED_NUMBERED.value):
                if not isinstance(value, (list, tuple)) or len(value) != 2:
                    raise ValueError(f"{tag} expects [digits, separator]")
                digits, separator = value
                if separator is None:
                    raise ValueError(f"{tag} separator must be a string, got null")
                return {"strategy": tag, "digits": digits, "separator": separator}
        if isinstance(data, dict) and data.get("strategy") in _NUMBERED and data.get("separator") is None:
            data = {**data, "separator": Separator.dash()}
        return data

    @model_validator(mode="after")
    def check_digits(self) -> "Naming":
        if self.strategy == NamingStrategy.PLAIN:
            if self.digits is not None or self.separator is not None:
                raise ValueError("Plain naming takes neither digits nor a separator")
        else:
            if self.digits is None:
                raise ValueError(f"{self.strategy.value} naming needs a digit count")
            if self.digits < 1:
                raise ValueError(f"digits must be at least 1, got {self.digits}")
            if self.separator is None:
                raise ValueError(f"{self.strategy.value} naming needs a separator")
        return self

    @model_serializer
    def serialize_tagged(self) -> Union[str, Dict[str, List[Union[int, str]]]]:
        if self.strategy == NamingStrategy.PLAIN:
            return self.strategy.value
        return {self.strategy.value: [self.digits, str(self.separator)]}

    @classmethod
    def plain(cls) -> "Naming":
        return cls(strategy=NamingStrategy.PLAIN)

    @classmethod
    def numbered(cls, digits: int, separator: Optional[Separator] = None) -> "Naming":
        return cls(strategy=NamingStrategy.NUMBERED, digits=digits, separator=separator)

    @classmethod
    def zero_padded(cls, digits: int, separator: Optional[Separator] = None) -> "Naming":
        return cls(strategy=NamingStrategy.ZERO_PADDED_NUMBERED, digits=digits, separator=separator)

    def apply(self, combined: str, rng: RandomSource) -> str:
        """
        Append the number suffix, if any, to an already cased name.

        Args:
            combined: The cased adjective/noun combination
            rng: Random source for the number draw

        Returns:
            The name with its suffix
        """
        if self.strategy == NamingStrategy.PLAIN:
            return combined
        if self.strategy == NamingStrategy.NUMBERED:
            number = str(generate_number(self.digits, rng))
        else:
            number = generate_padded_number(self.digits, rng)
        return f"{combined}{self.separator}{number}"
