"""Target calculator data models."""

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Iterator, Mapping, Optional

FIELD_LABELS = {
    "prev_close": "Previous Day Closing Price",
    "daily_volatility": "Daily Volatility",
    "today_high": "Today's High Price",
    "today_low": "Today's Low Price",
    "current_price": "Current Price",
}


@dataclass(frozen=True)
class TargetInputs:
    """Raw text of the five market inputs."""
    prev_close: Optional[str] = None
    daily_volatility: Optional[str] = None
    today_high: Optional[str] = None
    today_low: Optional[str] = None
    current_price: Optional[str] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "TargetInputs":
        """Build inputs from a mapping; numbers are kept as their text form."""
        return cls(**{
            f.name: None if values.get(f.name) is None else str(values[f.name])
            for f in fields(cls)
        })

    def items(self) -> Iterator[tuple[str, Optional[str]]]:
        for f in fields(self):
            yield f.name, getattr(self, f.name)


@dataclass(frozen=True)
class TargetResult:
    """Ordered price targets, highest first."""
    levels: tuple[Decimal, ...]
    decimals: int = 2

    @property
    def formatted(self) -> tuple[str, ...]:
        return tuple(f"{level:.{self.decimals}f}" for level in self.levels)

    def as_list(self) -> list[str]:
        return list(self.formatted)

    def __iter__(self) -> Iterator[str]:
        return iter(self.formatted)

    def __len__(self) -> int:
        return len(self.levels)
