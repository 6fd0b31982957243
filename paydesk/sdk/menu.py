"""Main menu selection parsing."""

import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class MenuOption(int, Enum):
    """Main menu choices. INVALID covers both unparsable and out-of-range input."""

    EXIT = 0
    PAYROLL = 1
    ABOUT = 2
    INVALID = 3


SELECTABLE = (MenuOption.EXIT, MenuOption.PAYROLL, MenuOption.ABOUT)

UNPARSABLE_MESSAGE = "Invalid input, please choose again"
OUT_OF_RANGE_MESSAGE = "Choice out of range, please choose again"


def _parse_int(text: str) -> Optional[int]:
    try:
        return int((text or "").strip())
    except ValueError:
        return None


def parse_menu_choice(text: str) -> MenuOption:
    """Map one line of user input to a menu option."""
    choice = _parse_int(text)
    if choice is None:
        logger.debug(f"menu input not a number: {text!r}")
        return MenuOption.INVALID

    for option in SELECTABLE:
        if option.value == choice:
            return option

    logger.debug(f"menu choice out of range: {choice}")
    return MenuOption.INVALID


def invalid_menu_message(text: str) -> Optional[str]:
    """Explain why input is not a menu choice, or None if it is one."""
    choice = _parse_int(text)
    if choice is None:
        return UNPARSABLE_MESSAGE
    if parse_menu_choice(text) == MenuOption.INVALID:
        return OUT_OF_RANGE_MESSAGE
    return None
