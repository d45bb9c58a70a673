"""
Dice engine for the villager generator.

All randomness used during generation goes through a DiceRoller, which wraps
an injectable random.Random so that tests and the --seed option can replay
a generation exactly.
"""

import logging
import random
import re
from dataclasses import dataclass
from typing import Any, Optional, Sequence

logger = logging.getLogger(__name__)


_NOTATION = re.compile(r"^(\d*)d(\d+)([+-]\d+)?$")


def roll_each(count: int, sides: int, rng: Optional[random.Random] = None) -> list[int]:
    """Roll `count` dice with `sides` faces and return each die."""
    if count < 1 or sides < 1:
        raise ValueError(f"Invalid dice: {count}d{sides}")
    source = rng if rng is not None else random
    return [source.randint(1, sides) for _ in range(count)]


def roll(count: int, sides: int, rng: Optional[random.Random] = None) -> int:
    """
    Roll `count` dice with `sides` faces and return the sum.

    Args:
        count: Number of dice (at least 1)
        sides: Faces per die (at least 1)
        rng: Random source; the module-level generator if None

    Returns:
        Total of all dice, between count and count * sides
    """
    return sum(roll_each(count, sides, rng))


@dataclass
class DiceResult:
    """Result of a dice roll with full information."""
    notation: str
    rolls: list[int]
    modifier: int
    total: int
    reason: str

    def __str__(self) -> str:
        if self.modifier > 0:
            return f"{self.notation}: {self.rolls} + {self.modifier} = {self.total}"
        elif self.modifier < 0:
            return f"{self.notation}: {self.rolls} - {abs(self.modifier)} = {self.total}"
        return f"{self.notation}: {self.rolls} = {self.total}"


class DiceRoller:
    """
    Randomization interface for villager generation.

    Each generator owns one roller. Pass a seeded random.Random (or call
    set_seed) for reproducible output; by default rolls are unseeded.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng if rng is not None else random.Random()

    def set_seed(self, seed: int) -> None:
        """Set random seed for reproducibility."""
        self._rng.seed(seed)

    def roll(self, dice: str, reason: str = "") -> DiceResult:
        """
        Roll dice using standard notation (e.g., '3d6', 'd20', '1d4+2').

        Args:
            dice: Dice notation string
            reason: Why this roll is being made (for logging)

        Returns:
            DiceResult with individual rolls and total
        """
        match = _NOTATION.match(dice.replace(" ", "").lower())
        if not match:
            raise ValueError(f"Invalid dice notation: {dice}")

        num_dice = int(match.group(1)) if match.group(1) else 1
        die_size = int(match.group(2))
        modifier = int(match.group(3)) if match.group(3) else 0
        if num_dice < 1 or die_size < 1:
            raise ValueError(f"Invalid dice notation: {dice}")

        rolls = roll_each(num_dice, die_size, self._rng)
        result = DiceResult(
            notation=dice,
            rolls=rolls,
            modifier=modifier,
            total=sum(rolls) + modifier,
            reason=reason,
        )
        logger.debug("Rolled %s (%s)", result, reason or "unspecified")
        return result

    def roll_sum(self, count: int, sides: int, reason: str = "") -> int:
        """Roll `count`d`sides` and return only the total."""
        total = roll(count, sides, self._rng)
        logger.debug("Rolled %dd%d = %d (%s)", count, sides, total, reason or "unspecified")
        return total

    def roll_d20(self, reason: str = "") -> int:
        """Convenience method for d20 table rolls."""
        return self.roll_sum(1, 20, reason)

    def roll_percentile(self, reason: str = "") -> int:
        """Roll d100 for percentile tables."""
        return self.roll_sum(1, 100, reason)

    def choice(self, options: Sequence[Any], reason: str = "") -> Any:
        """
        Pick one option by rolling a die with one face per option.

        Raises:
            IndexError: If options is empty
        """
        if not options:
            raise IndexError("Cannot choose from an empty sequence")
        return options[self.roll_sum(1, len(options), reason) - 1]
