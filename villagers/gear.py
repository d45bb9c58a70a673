"""
Gear template expansion.

Occupation gear is written as a template, e.g. "{2d6} {crop} seeds, hoe".
Each bracket token is resolved by a function registered against the token's
pattern; new tokens only need a new resolver.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Pattern

from villagers.dice import DiceRoller
from villagers.villager_data import (
    ANIMAL_TRAINER_GEAR,
    CROPS,
    INSTRUMENTS,
    POULTRY,
)

logger = logging.getLogger(__name__)

TokenResolver = Callable[["re.Match[str]", DiceRoller], str]


@dataclass(frozen=True)
class GearToken:
    """A registered template token and the function that resolves it."""
    name: str
    pattern: Pattern[str]
    resolve: TokenResolver


# Applied in registration order.
TOKEN_REGISTRY: list[GearToken] = []


def register_token(name: str, pattern: str) -> Callable[[TokenResolver], TokenResolver]:
    """Register a resolver for every template token matching `pattern`."""
    def decorator(func: TokenResolver) -> TokenResolver:
        TOKEN_REGISTRY.append(GearToken(name, re.compile(pattern), func))
        logger.debug("Registered gear token %r for pattern %s", name, pattern)
        return func
    return decorator


# =============================================================================
# TOKEN RESOLVERS
# =============================================================================

@register_token("dice", r"\{(\d+)d(\d+)\}")
def _resolve_dice(match: "re.Match[str]", dice: DiceRoller) -> str:
    count, sides = int(match.group(1)), int(match.group(2))
    return str(dice.roll_sum(count, sides, "gear dice"))


@register_token("scaled_dice", r"\{(\d+)\+(\d+)d(\d+)\*(\d+)\}")
def _resolve_scaled_dice(match: "re.Match[str]", dice: DiceRoller) -> str:
    # {B+NdS*M} means B + (NdS * M)
    base, count, sides, factor = (int(g) for g in match.groups())
    return str(base + dice.roll_sum(count, sides, "gear scaled dice") * factor)


@register_token("crop", r"\{crop\}")
def _resolve_crop(match: "re.Match[str]", dice: DiceRoller) -> str:
    return dice.choice(CROPS, "crop")


@register_token("instrument", r"\{instrument\}")
def _resolve_instrument(match: "re.Match[str]", dice: DiceRoller) -> str:
    return dice.choice(INSTRUMENTS, "instrument")


@register_token("animal_trainer_gear", r"\{animal_trainer_gear\}")
def _resolve_animal_trainer_gear(match: "re.Match[str]", dice: DiceRoller) -> str:
    return dice.choice(ANIMAL_TRAINER_GEAR, "animal trainer gear")


@register_token("poultry", r"\{poultry\}")
def _resolve_poultry(match: "re.Match[str]", dice: DiceRoller) -> str:
    # Every flock is counted before one is picked
    flocks = [
        f"{dice.roll_sum(1, sides, f'{bird} count')} {bird}"
        for sides, bird in POULTRY
    ]
    return dice.choice(flocks, "poultry")


# =============================================================================
# EXPANSION AND SPLITTING
# =============================================================================

def expand_gear_template(template: str, dice: DiceRoller) -> str:
    """
    Replace every registered token in a gear template.

    Each occurrence is rolled independently; text that matches no token is
    returned unchanged.

    Args:
        template: Gear template from the occupation table
        dice: Roller used for every token

    Returns:
        The expanded gear description
    """
    text = template
    for token in TOKEN_REGISTRY:
        text, replaced = token.pattern.subn(lambda m, t=token: t.resolve(m, dice), text)
        if replaced:
            logger.debug("Expanded %d %r token(s) in %r", replaced, token.name, template)
    return text


def split_gear_items(gear: str) -> list[str]:
    """
    Split a gear description on commas outside parentheses.

    "cage (1 wt), 2 ferrets" gives ["cage (1 wt)", "2 ferrets"].
    """
    items = []
    current = []
    depth = 0
    for char in gear:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        if char == "," and depth == 0:
            items.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    tail = "".join(current).strip()
    if tail:
        items.append(tail)
    return items
