"""
Length module post-processes a generated name to meet a target length.
"""

from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_serializer, model_validator


class LengthPolicy(str, Enum):
    """Length policies; the values double as the serialized tags"""
    TRUNCATE = "Truncate"
    REROLL = "Reroll"
    NONE = "None"


class Length(BaseModel):
    """
    Target length for generated names, counted in characters.

    ``Truncate`` cuts longer names down. ``Reroll`` makes the generator draw
    fresh names until one has exactly the target length.
    """
    model_config = ConfigDict(frozen=True)

    policy: LengthPolicy = LengthPolicy.NONE
    limit: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="before")
    @classmethod
    def parse_tagged(cls, data: Any) -> Any:
        """Accept ``"None"`` and ``{"Truncate": 20}`` as well as field dicts"""
        if isinstance(data, str):
            return {"policy": data}
        if isinstance(data, dict) and len(data) == 1:
            (tag, value), = data.items()
            if tag in (LengthPolicy.TRUNCATE.value, LengthPolicy.REROLL.value):
                return {"policy": tag, "limit": value}
        return data

    @model_validator(mode="after")
    def check_limit(self) -> "Length":
        if self.policy == LengthPolicy.NONE:
            if self.limit is not None:
                raise ValueError("no length limit expected for policy None")
        elif self.limit is None:
            raise ValueError(f"{self.policy.value} needs a length limit")
        return self

    @model_serializer
    def serialize_tagged(self) -> Union[str, Dict[str, int]]:
        if self.policy == LengthPolicy.NONE:
            return self.policy.value
        return {self.policy.value: self.limit}

    @classmethod
    def none(cls) -> "Length":
        return cls(policy=LengthPolicy.NONE)

    @classmethod
    def truncate(cls, limit: int) -> "Length":
        return cls(policy=LengthPolicy.TRUNCATE, limit=limit)

    @classmethod
    def reroll(cls, limit: int) -> "Length":
        return cls(policy=LengthPolicy.REROLL, limit=limit)

    def apply(self, name: str) -> str:
        # Slicing a str never splits a code point.
        if self.policy == LengthPolicy.TRUNCATE:
            return name[:self.limit]
        return name

    def accepts(self, name: str) -> bool:
        if self.policy == LengthPolicy.REROLL:
            return len(name) == self.limit
        return True
