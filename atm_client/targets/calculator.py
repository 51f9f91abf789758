"""
Volatility target calculator.

Every target is the current price plus a multiple of the daily volatility.
The previous close, today's high and today's low are required and must be
numbers, but they do not enter the formula. Each input is read from its
leading numeric text, so trailing characters are ignored.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, DecimalException
from typing import Any, Mapping, Optional, Sequence, Union

import structlog

from ..errors import InvalidNumber, MissingField
from .models import TargetInputs, TargetResult

logger = structlog.get_logger(__name__)

DEFAULT_MULTIPLIERS = ("2", "1.5", "1", "0.5")

# Leading decimal literal; trailing text after it is ignored ("102abc" reads as 102)
NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class TargetCalculator:
    """Pure calculator from TargetInputs to a TargetResult."""

    def __init__(self, multipliers: Sequence[Union[str, int, float]] = DEFAULT_MULTIPLIERS,
                 decimals: int = 2):
        if not multipliers:
            raise ValueError("At least one multiplier is required")
        if decimals < 0:
            raise ValueError("decimals must be non-negative")

        self.multipliers = tuple(Decimal(str(m)) for m in multipliers)
        self.decimals = decimals
        self._quantum = Decimal(1).scaleb(-decimals)

    def calculate(self, inputs: Union[TargetInputs, Mapping[str, Any]]) -> TargetResult:
        """
        Compute the targets.

        Args:
            inputs: TargetInputs or a mapping with the same field names

        Returns:
            TargetResult ordered by multiplier

        Raises:
            MissingField: If any input is absent or blank
            InvalidNumber: If any input does not start with a finite number,
                or the targets fall outside the decimal range
        """
        if not isinstance(inputs, TargetInputs):
            inputs = TargetInputs.from_mapping(inputs)

        missing = [name for name, raw in inputs.items() if raw is None or not raw.strip()]
        if missing:
            logger.warning("Target calculation rejected", reason="missing_fields", fields=missing)
            raise MissingField(
                f"Missing required fields: {', '.join(missing)}",
                fields=missing
            )

        values = {name: self._parse(name, raw) for name, raw in inputs.items()}

        price = values["current_price"]
        volatility = values["daily_volatility"]

        try:
            levels = tuple(
                (price + multiplier * volatility).quantize(self._quantum, rounding=ROUND_HALF_UP)
                for multiplier in self.multipliers
            )
        except DecimalException as e:
            logger.warning("Target calculation rejected", reason="out_of_range",
                           current_price=inputs.current_price, daily_volatility=inputs.daily_volatility)
            raise InvalidNumber(
                "Inputs are too large to calculate targets",
                field="current_price",
                raw_value=inputs.current_price
            ) from e

        logger.debug("Targets calculated", current_price=str(price),
                     daily_volatility=str(volatility), targets=[str(level) for level in levels])
        return TargetResult(levels=levels, decimals=self.decimals)

    @staticmethod
    def _parse(name: str, raw: Optional[str]) -> Decimal:
        match = NUMBER_PREFIX.match(raw.strip())  # type: ignore[union-attr]
        if match is None:
            logger.warning("Target calculation rejected", reason="invalid_number", field=name, value=raw)
            raise InvalidNumber(
                f"{name} is not a valid number: {raw!r}",
                field=name,
                raw_value=raw
            )
        return Decimal(match.group())
