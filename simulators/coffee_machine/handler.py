"""
Supply Parser
=============

Token-driven state machine for the coffee machine console.

From Idle:
    remaining  -> print status
    take       -> empty the cashier
    fill       -> ask for water, milk, beans, cups (one number each)
    buy        -> ask for a drink (1, 2, 3) or back
    exit       -> stop

``transition()`` is pure and returns the command to perform;
``SupplyParser`` applies it to a ``CoffeeMachine`` and returns the output.
"""

import logging
from typing import Dict, List, Optional

from shared.errors import TokenParseError
from shared.helpers import generate_session_id, parse_int_strict

from .inventory import CoffeeMachine
from .models import (
    DrinkKind,
    HandlerCommand,
    HandlerState,
    HandlerTransition,
    Resource,
    SaleResult,
)

logger = logging.getLogger(__name__)

PROMPTS: Dict[HandlerState, str] = {
    HandlerState.IDLE: "Write action (buy, fill, take, remaining, exit): > ",
    HandlerState.SELLING: (
        "What do you want to buy? 1 - espresso, 2 - latte, 3 - cappuccino, "
        "back - to main menu: > "
    ),
    HandlerState.FILLING_WATER: "Write how many ml of water do you want to add: > ",
    HandlerState.FILLING_MILK: "Write how many ml of milk do you want to add: > ",
    HandlerState.FILLING_BEANS: "Write how many grams of coffee beans do you want to add: > ",
    HandlerState.FILLING_CUPS: "Write how many disposable cups of coffee do you want to add: > ",
    HandlerState.EXIT: "Shutdown the machine",
}

UNRECOGNISED_MESSAGE = "Unrecognised input"

# filling state -> (resource it fills, next state)
FILL_SEQUENCE: Dict[HandlerState, tuple] = {
    HandlerState.FILLING_WATER: (Resource.WATER, HandlerState.FILLING_MILK),
    HandlerState.FILLING_MILK: (Resource.MILK, HandlerState.FILLING_BEANS),
    HandlerState.FILLING_BEANS: (Resource.BEANS, HandlerState.FILLING_CUPS),
    HandlerState.FILLING_CUPS: (Resource.CUPS, HandlerState.IDLE),
}

IDLE_COMMANDS: Dict[str, HandlerTransition] = {
    "remaining": HandlerTransition(HandlerState.IDLE, HandlerCommand.SHOW_STATUS),
    "take": HandlerTransition(HandlerState.IDLE, HandlerCommand.TAKE_CASH),
    "fill": HandlerTransition(HandlerState.FILLING_WATER),
    "buy": HandlerTransition(HandlerState.SELLING),
    "exit": HandlerTransition(HandlerState.EXIT),
}

MENU_TOKENS = tuple(str(number) for number in range(1, len(DrinkKind) + 1))
BACK_COMMAND = "back"


def transition(state: HandlerState, token: str) -> HandlerTransition:
    """
    Compute the Supply Parser step for a single token.

    Args:
        state: Current handler state
        token: Next input token

    Returns:
        HandlerTransition with the next state and the command to perform
    """
    if state == HandlerState.IDLE and token in IDLE_COMMANDS:
        return IDLE_COMMANDS[token]

    if state in FILL_SEQUENCE:
        resource, next_state = FILL_SEQUENCE[state]
        try:
            quantity = parse_int_strict(token)
        except TokenParseError:
            return _unrecognised()
        return HandlerTransition(
            next_state,
            HandlerCommand.RESTOCK,
            resource=resource,
            quantity=quantity,
        )

    if state == HandlerState.SELLING:
        if token in MENU_TOKENS:
            return HandlerTransition(
                HandlerState.IDLE,
                HandlerCommand.SELL,
                drink=DrinkKind.from_choice(int(token)),
            )
        if token == BACK_COMMAND:
            return HandlerTransition(HandlerState.IDLE)

    return _unrecognised()


def _unrecognised() -> HandlerTransition:
    return HandlerTransition(HandlerState.IDLE, HandlerCommand.UNRECOGNISED)


class SupplyParser:
    """
    One coffee machine session: the handler state plus the machine it drives.
    """

    def __init__(self, machine: Optional[CoffeeMachine] = None, session_id: Optional[str] = None):
        self.machine = machine or CoffeeMachine()
        self.session_id = session_id or generate_session_id()
        self.state = HandlerState.IDLE
        self.last_sale: Optional[SaleResult] = None

    @property
    def finished(self) -> bool:
        return self.state == HandlerState.EXIT

    def prompt(self) -> Optional[str]:
        return PROMPTS[self.state]

    def handle(self, token: str) -> List[str]:
        """
        Consume one token.

        Returns:
            Output lines to print
        """
        step = transition(self.state, token)
        logger.debug(f"[{self.session_id}] {self.state.value} --{token!r}--> {step.state.value}")
        self.state = step.state

        if step.command == HandlerCommand.SHOW_STATUS:
            return [self.machine.report()]

        if step.command == HandlerCommand.TAKE_CASH:
            return [f"I gave you ${self.machine.empty_cashier()}"]

        if step.command == HandlerCommand.RESTOCK:
            self.machine.restock(**{step.resource.value: step.quantity})
            return []

        if step.command == HandlerCommand.SELL:
            self.last_sale = self.machine.sell(step.drink)
            return [self.last_sale.message]

        if step.command == HandlerCommand.UNRECOGNISED:
            logger.warning(f"[{self.session_id}] Unrecognised input {token!r}")
            return [UNRECOGNISED_MESSAGE]

        return []
