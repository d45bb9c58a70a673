"""
Core data models for the villager generator.

Defines the species and ability enums, the raw reference row type, and the
immutable Villager record produced by the generator.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping

from villagers.gear import split_gear_items
from villagers.villager_data import KNOW_YOUR_STUFF


# A single row from one of the reference tables, addressed by column index.
ReferenceRow = tuple[str, ...]


class Species(str, Enum):
    """Villager species. Occupations with no species tag are Human."""
    HUMAN = "Human"
    DWARF = "Dwarf"
    ELF = "Elf"
    HALFLING = "Halfling"

    @classmethod
    def from_tag(cls, tag: str) -> "Species":
        """Resolve an occupation-table species tag, defaulting to Human."""
        tag = tag.strip()
        for species in cls:
            if species.value == tag:
                return species
        return cls.HUMAN


class Ability(str, Enum):
    """The seven ability scores, in sheet order."""
    STR = "STR"
    DEX = "DEX"
    CON = "CON"
    INT = "INT"
    WIS = "WIS"
    CHA = "CHA"
    LUC = "LUC"


@dataclass(frozen=True)
class Villager:
    """
    A fully generated villager.

    Built once by VillagerGenerator and never mutated afterwards.
    """
    name: str
    species: Species
    occupation: str
    look: str
    stats: Mapping[Ability, int]
    modifiers: Mapping[Ability, int]
    hp: int
    load: int
    damage: str
    gear: tuple[str, ...]
    bond: str
    heritage_moves: tuple[str, ...] = field(default_factory=tuple)

    @property
    def gear_items(self) -> list[str]:
        """Gear strings broken into individual items for display."""
        items: list[str] = []
        for entry in self.gear:
            items.extend(split_gear_items(entry))
        return items

    @property
    def moves(self) -> list[str]:
        """Heritage moves followed by the move every villager has."""
        return [*self.heritage_moves, KNOW_YOUR_STUFF]

    def __hash__(self) -> int:
        return hash((
            self.name,
            self.species,
            self.occupation,
            self.look,
            tuple(self.stats.items()),
            tuple(self.modifiers.items()),
            self.hp,
            self.load,
            self.damage,
            self.gear,
            self.bond,
            self.heritage_moves,
        ))

    def __str__(self) -> str:
        return f"{self.name} the {self.occupation} ({self.species.value})"
