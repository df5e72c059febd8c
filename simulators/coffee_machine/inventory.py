"""
Coffee Inventory Model
======================

Owns the machine's supplies and cash. All mutation goes through ``sell``,
``restock`` and ``empty_cashier``.

Usage:
    machine = CoffeeMachine()
    result = machine.sell(DrinkKind.ESPRESSO)
    print(result.message)
"""

import logging
from typing import Optional

from .models import Supplies, Cashier, DrinkKind, SaleResult, SaleStatus

logger = logging.getLogger(__name__)

DEFAULT_SUPPLIES = Supplies(water=400, milk=540, beans=120, cups=9)
DEFAULT_CASH = 550

SALE_OK_MESSAGE = "I have enough resources, making you a coffee!"


class CoffeeMachine:
    def __init__(self, supplies: Optional[Supplies] = None, cash: int = DEFAULT_CASH):
        self.supplies = supplies if supplies is not None else DEFAULT_SUPPLIES
        self.cashier = Cashier(cash)

    @property
    def cash(self) -> int:
        return self.cashier.money

    def sell(self, drink: DrinkKind) -> SaleResult:
        """
        Sell one drink.

        The feasibility check runs first; supplies and cash only change when
        every counter covers the recipe.

        Returns:
            SaleResult naming the first deficient resource on failure
        """
        needed = drink.required
        missing = self.supplies.first_shortage(needed)

        if missing is not None:
            logger.warning(f"Cannot make {drink.name.lower()}: not enough {missing.value}")
            return SaleResult(
                status=SaleStatus.INSUFFICIENT,
                drink=drink,
                message=f"Sorry, not enough {missing.value}!",
                missing=missing,
            )

        self.supplies = self.supplies.remove(needed)
        self.cashier.deposit(drink.price)
        logger.info(f"Sold {drink.name.lower()} for ${drink.price}")
        return SaleResult(status=SaleStatus.OK, drink=drink, message=SALE_OK_MESSAGE)

    def restock(self, water: int = 0, milk: int = 0, beans: int = 0, cups: int = 0) -> None:
        """Add quantities to the current supplies (zero leaves a counter unchanged)."""
        self.supplies = self.supplies.add(Supplies(water, milk, beans, cups))
        logger.info(f"Restocked water={water} milk={milk} beans={beans} cups={cups}")

    def empty_cashier(self) -> int:
        """Withdraw all money."""
        amount = self.cashier.withdraw()
        logger.info(f"Withdrew ${amount}")
        return amount

    def report(self) -> str:
        return f"The coffee machine has:\n{self.supplies}\n{self.cashier}"

    def __str__(self) -> str:
        return self.report()
