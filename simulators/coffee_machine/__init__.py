"""
coffee_machine: Coffee Vending Machine Simulator
================================================

Console simulator tracking water, milk, beans, cups and cash.

Commands (typed one token at a time):
    buy        then 1 (espresso), 2 (latte), 3 (cappuccino) or back
    fill       then four numbers: water ml, milk ml, beans g, cups
    take       withdraw all money
    remaining  print supplies and cash
    exit       stop the machine

Architecture:
    stdin -> shared.console.run_session -> SupplyParser (state machine)
        -> CoffeeMachine (supplies + cashier)
"""

import logging
import sys

from shared.console import run_session
from shared.settings import Settings, configure_logging

from .inventory import CoffeeMachine, DEFAULT_SUPPLIES, DEFAULT_CASH
from .models import (
    Resource,
    Supplies,
    Cashier,
    DrinkKind,
    UnknownDrinkError,
    SaleStatus,
    SaleResult,
    HandlerState,
    HandlerCommand,
    HandlerTransition,
)
from .handler import SupplyParser, transition, PROMPTS

logger = logging.getLogger(__name__)

__all__ = [
    "CoffeeMachine",
    "DEFAULT_SUPPLIES",
    "DEFAULT_CASH",
    "Resource",
    "Supplies",
    "Cashier",
    "DrinkKind",
    "UnknownDrinkError",
    "SaleStatus",
    "SaleResult",
    "HandlerState",
    "HandlerCommand",
    "HandlerTransition",
    "SupplyParser",
    "transition",
    "PROMPTS",
    "main",
]


def main() -> int:
    """Entry point for the ``coffee-machine`` console script."""
    configure_logging(Settings.from_environment())

    session = SupplyParser(CoffeeMachine())
    logger.info(f"[{session.session_id}] Coffee machine started")
    code = run_session(session, sys.stdin, sys.stdout)
    logger.info(f"[{session.session_id}] Coffee machine stopped, cash ${session.machine.cash}")
    return code
