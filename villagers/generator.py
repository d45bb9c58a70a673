"""
Villager generator.

Rolls ability scores, picks an occupation on the d100 table, expands its
gear, and looks up a name, a look and a bond, producing one immutable
Villager per call.
"""

import logging
from types import MappingProxyType
from typing import Optional

from villagers.data_models import Ability, ReferenceRow, Species, Villager
from villagers.dice import DiceRoller
from villagers.gear import expand_gear_template
from villagers.table_loader import BOND_PLACEHOLDER, ReferenceTables
from villagers.villager_data import DWARF_MOVE, ELF_MOVE, HALFLING_MOVE

logger = logging.getLogger(__name__)


DAMAGE = "d4"
HP_BONUS = 4
LOAD_BONUS = 4

# Upper score bound (inclusive) -> modifier; scores above the last bound get +3
MODIFIER_STEPS = [
    (3, -3),
    (5, -2),
    (8, -1),
    (12, 0),
    (15, 1),
    (17, 2),
]
MAX_MODIFIER = 3

# Name table column for species with their own names. Humans use the
# common columns 1-3.
SPECIES_NAME_COLUMNS = {
    Species.ELF: 4,
    Species.DWARF: 5,
    Species.HALFLING: 6,
}

HERITAGE_MOVES = {
    Species.HUMAN: (),
    Species.DWARF: (DWARF_MOVE,),
    Species.ELF: (ELF_MOVE,),
    Species.HALFLING: (HALFLING_MOVE,),
}

# Look table column for each feature, in the order they are described
LOOK_FEATURES = [
    ("face", 1),
    ("eyes", 2),
    ("hair", 3),
    ("body", 4),
    ("clothing", 5),
]


def get_modifier(score: int) -> int:
    """Get the ability modifier for a score."""
    for upper, modifier in MODIFIER_STEPS:
        if score <= upper:
            return modifier
    return MAX_MODIFIER


def format_modifier(modifier: int) -> str:
    """Format a modifier with an explicit sign, e.g. '+1', '+0', '-2'."""
    return f"+{modifier}" if modifier >= 0 else str(modifier)


def fill_bond(template: str, detail: str) -> str:
    """Put a bond detail in place of the first '...' of a bond template."""
    return template.replace(BOND_PLACEHOLDER, detail, 1)


def get_heritage_moves(species: Species) -> tuple[str, ...]:
    """Get the heritage moves granted by a species."""
    return HERITAGE_MOVES[species]


class VillagerGenerator:
    """
    Generates villagers from a set of reference tables.

    The draw order within generate() is fixed, so a seeded DiceRoller
    always produces the same villagers.
    """

    def __init__(self, tables: ReferenceTables, dice: Optional[DiceRoller] = None):
        """
        Initialize the generator.

        Args:
            tables: Loaded reference tables
            dice: Roller to draw from (a fresh unseeded roller if None)
        """
        self.tables = tables
        self.dice = dice if dice is not None else DiceRoller()

    def generate(self) -> Villager:
        """Generate one complete villager."""
        stats = self.roll_abilities()
        modifiers = {ability: get_modifier(score) for ability, score in stats.items()}

        occupation = self.tables.find_occupation(self.dice.roll_percentile("occupation"))
        species = Species.from_tag(occupation.species_tag)
        gear = expand_gear_template(occupation.gear_template, self.dice)

        villager = Villager(
            name=self.generate_name(species),
            species=species,
            occupation=occupation.name,
            look=self.generate_look(),
            stats=MappingProxyType(stats),
            modifiers=MappingProxyType(modifiers),
            hp=stats[Ability.CON] + HP_BONUS,
            load=stats[Ability.STR] + LOAD_BONUS,
            damage=DAMAGE,
            gear=(gear,),
            bond=self.generate_bond(),
            heritage_moves=get_heritage_moves(species),
        )
        logger.debug("Generated villager: %s", villager)
        return villager

    def generate_many(self, count: int) -> list[Villager]:
        """Generate `count` villagers; zero or a negative count gives none."""
        return [self.generate() for _ in range(max(count, 0))]

    def roll_abilities(self) -> dict[Ability, int]:
        """Roll 3d6 for each ability, in sheet order."""
        return {ability: self.dice.roll_sum(3, 6, ability.value) for ability in Ability}

    def generate_name(self, species: Species) -> str:
        """
        Pick a name from the name table.

        Elves, dwarves and halflings read their own column. Everyone else
        flips a d2: on a 1 a second d2 picks column 1 or 2, on a 2 the name
        comes from column 3.
        """
        row = self._row(self.tables.names, self.dice.roll_d20("name row"))

        column = SPECIES_NAME_COLUMNS.get(species)
        if column is None:
            if self.dice.roll_sum(1, 2, "name style") == 1:
                column = self.dice.roll_sum(1, 2, "common name column")
            else:
                column = 3
        return row[column]

    def generate_look(self) -> str:
        """Describe face, eyes, hair, body and clothing from separate d20 rolls."""
        parts = []
        for feature, column in LOOK_FEATURES:
            row = self._row(self.tables.looks, self.dice.roll_d20(f"look {feature}"))
            parts.append(f"{row[column].lower()} {feature}")
        return ", ".join(parts)

    def generate_bond(self) -> str:
        """Pick a bond template on a d20 and fill it with a d4 detail."""
        row = self._row(self.tables.bonds, self.dice.roll_d20("bond"))
        detail = row[self.dice.roll_sum(1, 4, "bond detail")]
        return fill_bond(row[0], detail)

    @staticmethod
    def _row(rows: tuple[ReferenceRow, ...], roll: int) -> ReferenceRow:
        return rows[roll - 1]
