"""
Conversion Engine
=================

Converts a value between two unit phrases.

Rules
-----
- Length -> Length, Weight -> Weight: linear scaling through the base unit.
  Negative values are rejected.
- Temperature -> Temperature: fixed pairwise formulas; negatives allowed.
- Anything else (mixed categories, unknown units): conversion impossible.

Every outcome is a ``ConversionResult``; nothing here raises for bad units.

Usage:
    result = ConversionEngine.convert(10, "celsius", "fahrenheit")
    print(result.message)  # 10.0 degrees Celsius is 50.0 degrees Fahrenheit
"""

import logging
from typing import Callable, Dict, Tuple

from .catalog import UnitCatalog
from .models import Unit, Category, ConversionResult, ConversionStatus

logger = logging.getLogger(__name__)

LINEAR_CATEGORIES = (Category.LENGTH, Category.WEIGHT)

TEMPERATURE_FORMULAS: Dict[Tuple[Unit, Unit], Callable[[float], float]] = {
    (Unit.CELSIUS, Unit.FAHRENHEIT): lambda v: v * (9.0 / 5.0) + 32,
    (Unit.FAHRENHEIT, Unit.CELSIUS): lambda v: (v - 32) * (5.0 / 9.0),
    (Unit.KELVIN, Unit.CELSIUS): lambda v: v - 273.15,
    (Unit.CELSIUS, Unit.KELVIN): lambda v: v + 273.15,
    (Unit.FAHRENHEIT, Unit.KELVIN): lambda v: (v + 459.67) * (5.0 / 9.0),
    (Unit.KELVIN, Unit.FAHRENHEIT): lambda v: v * (9.0 / 5.0) - 459.67,
}


def format_number(value: float) -> str:
    """Render a number the way results are printed (``10.0``, ``273.15``)."""
    return repr(float(value))


class ConversionEngine:
    """
    Stateless conversion between units of the fixed table.
    """

    @staticmethod
    def convert(value: float, from_token: str, to_token: str) -> ConversionResult:
        """
        Convert ``value`` from one unit phrase to another.

        Args:
            value: Quantity to convert
            from_token: Source unit phrase, e.g. 'km' or 'degrees celsius'
            to_token: Destination unit phrase

        Returns:
            ConversionResult with status OK, NEGATIVE_VALUE or IMPOSSIBLE
        """
        value = float(value)
        from_unit, from_category = UnitCatalog.resolve(from_token)
        to_unit, to_category = UnitCatalog.resolve(to_token)

        if from_category == to_category and from_category in LINEAR_CATEGORIES:
            if value < 0.0:
                logger.warning(f"Rejected negative {from_category.value.lower()} value {value}")
                return ConversionResult(
                    status=ConversionStatus.NEGATIVE_VALUE,
                    message=f"{from_category.value} shouldn't be negative",
                    from_unit=from_unit,
                    to_unit=to_unit,
                )
            result = ConversionEngine.linear(value, from_unit, to_unit)

        elif from_category == to_category == Category.TEMPERATURE:
            result = ConversionEngine.temperature(value, from_unit, to_unit)

        else:
            logger.warning(
                f"Impossible conversion {from_token!r} ({from_category.value}) "
                f"-> {to_token!r} ({to_category.value})"
            )
            return ConversionResult(
                status=ConversionStatus.IMPOSSIBLE,
                message=f"Conversion from {from_unit.long_name} to {to_unit.long_name} is impossible",
                from_unit=from_unit,
                to_unit=to_unit,
            )

        message = (
            f"{format_number(value)} {from_unit.display_name(value)} is "
            f"{format_number(result)} {to_unit.display_name(result)}"
        )
        logger.info(f"Converted {value} {from_unit.name} -> {result} {to_unit.name}")
        return ConversionResult(
            status=ConversionStatus.OK,
            message=message,
            value=result,
            from_unit=from_unit,
            to_unit=to_unit,
        )

    @staticmethod
    def linear(value: float, from_unit: Unit, to_unit: Unit) -> float:
        """Scale through the category base unit."""
        return value * from_unit.factor / to_unit.factor

    @staticmethod
    def temperature(value: float, from_unit: Unit, to_unit: Unit) -> float:
        """Apply the fixed temperature formula for the pair (identity for same unit)."""
        if from_unit == to_unit:
            return value
        return TEMPERATURE_FORMULAS[(from_unit, to_unit)](value)
