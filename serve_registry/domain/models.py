"""
Domain models for the Serve Registry.

Defines the player record persisted in the catalog file. The model is frozen:
a player is built once with all five fields and never mutated afterwards.
"""
from __future__ import annotations

import math
import re
from typing import Annotated, Any, Sequence

from pydantic import BaseModel, BeforeValidator, Field

FIELD_DELIMITER = ","
FIELD_ORDER = ("name", "country", "error_count", "ace_count", "total_serves")

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+")


def _float_div(numerator: int, denominator: int) -> float:
    """Divide as floats, returning inf/nan instead of raising on a zero denominator."""
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator)
    return float(numerator) / float(denominator)


def _integer_text(value: Any) -> Any:
    """Reject counter text that is not a plain signed decimal integer."""
    if isinstance(value, str) and not _INTEGER_TEXT.fullmatch(value):
        raise ValueError(f"not an integer: {value!r}")
    return value


ServeCount = Annotated[int, BeforeValidator(_integer_text)]


class Player(BaseModel):
    """
    Serving statistics for a single player.

    Counters are not range-checked; zero serves produce a non-finite
    effectiveness rather than an error.
    """

    name: str = Field(..., description="Player name.")
    country: str = Field(..., description="Country the player represents.")
    error_count: ServeCount = Field(..., description="Serving errors.")
    ace_count: ServeCount = Field(..., description="Aces served.")
    total_serves: ServeCount = Field(..., description="Total serves attempted.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    def __init__(
        self,
        name: str,
        country: str,
        error_count: int,
        ace_count: int,
        total_serves: int,
    ) -> None:
        super().__init__(
            name=name,
            country=country,
            error_count=error_count,
            ace_count=ace_count,
            total_serves=total_serves,
        )

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> Player:
        """
        Build a player from the five text fields of a catalog row.

        Raises ``pydantic.ValidationError`` when a counter is not an integer.
        """
        return cls.model_validate(dict(zip(FIELD_ORDER, fields)))

    def effectiveness(self) -> float:
        """
        Serving effectiveness as a percentage.

        ``((serves - errors) / (serves + errors) + aces / serves) * 100``
        """
        clean_ratio = _float_div(
            self.total_serves - self.error_count, self.total_serves + self.error_count
        )
        ace_ratio = _float_div(self.ace_count, self.total_serves)
        return (clean_ratio + ace_ratio) * 100

    def describe(self) -> str:
        # Python float text: "nan", "inf" and full double precision.
        return (
            f"Name: {self.name}, Country: {self.country}, "
            f"Effectiveness: {self.effectiveness()}"
        )

    def to_delimited_text(self) -> str:
        # No quoting: a comma inside name or country corrupts the row.
        return FIELD_DELIMITER.join(str(getattr(self, field)) for field in FIELD_ORDER)

    def __str__(self) -> str:
        return self.describe()


__all__ = ["FIELD_DELIMITER", "FIELD_ORDER", "Player"]
