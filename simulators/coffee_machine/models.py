"""
Coffee Machine Models
=====================

Supplies, cash, the fixed drink recipes and the Supply Parser states.

Model Categories
----------------
Enumerations
    Resource, DrinkKind, HandlerState, HandlerCommand, SaleStatus

Entity Models
    Supplies, Cashier

Value Models
    SaleResult, HandlerTransition
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from shared.errors import SimulatorError


class UnknownDrinkError(SimulatorError):
    """Raised when a menu number does not name a drink."""
    pass


class Resource(str, Enum):
    """Supply counters, in the order they are checked before a sale."""
    WATER = "water"
    MILK = "milk"
    BEANS = "beans"
    CUPS = "cups"


@dataclass(frozen=True)
class Supplies:
    """
    Supply counters (ml of water, ml of milk, g of beans, cups).

    Immutable: ``add`` and ``remove`` return new values. ``remove`` may go
    negative; that result is only used to check feasibility.
    """
    water: int = 0
    milk: int = 0
    beans: int = 0
    cups: int = 0

    def add(self, other: "Supplies") -> "Supplies":
        return Supplies(
            self.water + other.water,
            self.milk + other.milk,
            self.beans + other.beans,
            self.cups + other.cups,
        )

    def remove(self, other: "Supplies") -> "Supplies":
        return Supplies(
            self.water - other.water,
            self.milk - other.milk,
            self.beans - other.beans,
            self.cups - other.cups,
        )

    def first_shortage(self, required: "Supplies") -> Optional[Resource]:
        """
        First resource (water, milk, beans, cups) that would go negative.

        Returns:
            The deficient resource, or None if there is enough of everything
        """
        remaining = self.remove(required)
        for resource in Resource:
            if getattr(remaining, resource.value) < 0:
                return resource
        return None

    def __str__(self) -> str:
        return (
            f"{self.water} of water\n"
            f"{self.milk} of milk\n"
            f"{self.beans} of coffee beans\n"
            f"{self.cups} of disposable cups"
        )


class Cashier:
    """Accumulated money total."""

    def __init__(self, money: int = 0):
        self._money = money

    @property
    def money(self) -> int:
        return self._money

    def deposit(self, amount: int) -> None:
        self._money += amount

    def withdraw(self) -> int:
        """Hand out the whole balance and reset it to zero."""
        amount = self._money
        self._money = 0
        return amount

    def __str__(self) -> str:
        return f"${self._money} of money"


class DrinkKind(Enum):
    """Fixed recipes: (water ml, milk ml, beans g, price $). Menu order is member order."""
    ESPRESSO = (250, 0, 16, 4)
    LATTE = (350, 75, 20, 7)
    CAPPUCCINO = (200, 100, 12, 6)

    def __init__(self, water: int, milk: int, beans: int, price: int):
        self.water = water
        self.milk = milk
        self.beans = beans
        self.price = price

    @property
    def required(self) -> Supplies:
        """Supplies consumed by one drink, including its cup."""
        return Supplies(self.water, self.milk, self.beans, 1)

    @classmethod
    def from_choice(cls, choice: int) -> "DrinkKind":
        """
        Drink for a 1-based menu number.

        Raises:
            UnknownDrinkError: If the number is not on the menu
        """
        kinds = list(cls)
        if not 1 <= choice <= len(kinds):
            raise UnknownDrinkError(f"No drink number {choice}")
        return kinds[choice - 1]


class SaleStatus(str, Enum):
    """Outcome of a sale."""
    OK = "OK"
    INSUFFICIENT = "INSUFFICIENT"


class SaleResult(BaseModel):
    """Result of selling one drink."""
    status: SaleStatus
    drink: DrinkKind
    message: str
    missing: Optional[Resource] = None

    @property
    def ok(self) -> bool:
        return self.status == SaleStatus.OK


class HandlerState(str, Enum):
    """Supply Parser states."""
    IDLE = "idle"
    SELLING = "selling"
    FILLING_WATER = "filling_water"
    FILLING_MILK = "filling_milk"
    FILLING_BEANS = "filling_beans"
    FILLING_CUPS = "filling_cups"
    EXIT = "exit"


class HandlerCommand(str, Enum):
    """Effect requested by a Supply Parser transition."""
    NONE = "none"
    SHOW_STATUS = "show_status"
    TAKE_CASH = "take_cash"
    RESTOCK = "restock"
    SELL = "sell"
    UNRECOGNISED = "unrecognised"


@dataclass(frozen=True)
class HandlerTransition:
    """
    Outcome of feeding one token to the Supply Parser.

    ``resource``/``quantity`` are set for RESTOCK, ``drink`` for SELL.
    """
    state: HandlerState
    command: HandlerCommand = HandlerCommand.NONE
    resource: Optional[Resource] = None
    quantity: Optional[int] = None
    drink: Optional[DrinkKind] = None
