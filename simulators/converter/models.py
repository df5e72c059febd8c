"""
Unit Converter Models
=====================

Fixed unit table, parser states and the value objects passed between the
Request Parser and the Conversion Engine.

Model Categories
----------------
Enumerations
    Category, Unit, ParserState, ParserEffect, ConversionStatus

Value Models
    ConversionRequest, ConversionResult, Transition
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Unit category - decides which conversion rule applies."""
    LENGTH = "Length"
    WEIGHT = "Weight"
    TEMPERATURE = "Temperature"
    UNKNOWN = "Unknown"


class Unit(Enum):
    """
    Closed table of convertible units.

    Each member carries its alias tokens, singular and plural names, the
    linear factor relative to the category base unit (meter, gram) and its
    category. Temperature units have no factor. Lookup order is member order.
    """

    METER = (("m",), "meter", "meters", 1.0, Category.LENGTH)
    KILOMETER = (("km",), "kilometer", "kilometers", 1000.0, Category.LENGTH)
    CENTIMETER = (("cm",), "centimeter", "centimeters", 0.01, Category.LENGTH)
    MILLIMETER = (("mm",), "millimeter", "millimeters", 0.001, Category.LENGTH)
    MILE = (("mi",), "mile", "miles", 1609.35, Category.LENGTH)
    YARD = (("yd",), "yard", "yards", 0.9144, Category.LENGTH)
    FOOT = (("ft",), "foot", "feet", 0.3048, Category.LENGTH)
    INCH = (("in",), "inch", "inches", 0.0254, Category.LENGTH)
    GRAM = (("g",), "gram", "grams", 1.0, Category.WEIGHT)
    KILOGRAM = (("kg",), "kilogram", "kilograms", 1000.0, Category.WEIGHT)
    MILLIGRAM = (("mg",), "milligram", "milligrams", 0.001, Category.WEIGHT)
    POUND = (("lb",), "pound", "pounds", 453.592, Category.WEIGHT)
    OUNCE = (("oz",), "ounce", "ounces", 28.349, Category.WEIGHT)
    CELSIUS = (("celsius", "dc", "c"), "degree Celsius", "degrees Celsius", None, Category.TEMPERATURE)
    FAHRENHEIT = (("fahrenheit", "df", "f"), "degree Fahrenheit", "degrees Fahrenheit", None, Category.TEMPERATURE)
    KELVIN = (("k",), "Kelvin", "Kelvins", None, Category.TEMPERATURE)
    UNKNOWN = (("",), "???", "???", None, Category.UNKNOWN)

    def __init__(
        self,
        aliases: Tuple[str, ...],
        short_name: str,
        long_name: str,
        factor: Optional[float],
        category: Category,
    ):
        self.aliases = aliases
        self.short_name = short_name
        self.long_name = long_name
        self.factor = factor
        self.category = category

    def matches(self, token: str) -> bool:
        """Case-insensitive match on aliases, then short name, then long name."""
        name = token.lower()
        return (
            name in self.aliases
            or self.short_name.lower() == name
            or self.long_name.lower() == name
        )

    def display_name(self, magnitude: float) -> str:
        """Singular short form for exactly 1.0, plural long form otherwise."""
        return self.short_name if magnitude == 1.0 else self.long_name


class ParserState(str, Enum):
    """Request Parser states."""
    IDLE = "idle"
    READ_NUMBER = "read_number"
    READ_UNIT_NAME_IN = "read_unit_name_in"
    READ_DEGREE_UNIT_NAME_IN = "read_degree_unit_name_in"
    READ_FILLER_WORD = "read_filler_word"
    READ_DEGREE_UNIT_NAME_OUT = "read_degree_unit_name_out"
    EXIT = "exit"


class ParserEffect(str, Enum):
    """Side effect requested by a transition, carried out by the session."""
    NONE = "none"
    CONVERT = "convert"
    PARSE_ERROR = "parse_error"


class ConversionStatus(str, Enum):
    """Outcome of a conversion."""
    OK = "OK"
    NEGATIVE_VALUE = "NEGATIVE_VALUE"
    IMPOSSIBLE = "IMPOSSIBLE"


# ============== Value Models ==============

class ConversionRequest(BaseModel):
    """
    Accumulated conversion request.

    Immutable: every parser step builds a new request. Unit phrases are
    stored lower-cased and space-joined.
    """
    value: float = 0.0
    from_unit: str = ""
    to_unit: str = ""

    model_config = ConfigDict(frozen=True)

    def with_value(self, value: float) -> "ConversionRequest":
        return self.model_copy(update={"value": value})

    def append_source(self, token: str) -> "ConversionRequest":
        return self.model_copy(update={"from_unit": _join(self.from_unit, token)})

    def append_destination(self, token: str) -> "ConversionRequest":
        return self.model_copy(update={"to_unit": _join(self.to_unit, token)})


def _join(phrase: str, token: str) -> str:
    return f"{phrase} {token.lower()}" if phrase else token.lower()


class ConversionResult(BaseModel):
    """Result of a conversion, successful or not."""
    status: ConversionStatus
    message: str
    value: Optional[float] = Field(None, description="Converted value, only set when status is OK")
    from_unit: Unit = Unit.UNKNOWN
    to_unit: Unit = Unit.UNKNOWN

    @property
    def ok(self) -> bool:
        return self.status == ConversionStatus.OK


@dataclass(frozen=True)
class Transition:
    """
    Outcome of feeding one token to the Request Parser.

    ``request`` is the accumulator for the next step (empty after any
    terminal transition). ``completed`` is only set with ``ParserEffect.CONVERT``.
    """
    state: ParserState
    request: ConversionRequest
    effect: ParserEffect = ParserEffect.NONE
    completed: Optional[ConversionRequest] = None
