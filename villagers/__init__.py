"""
Villager generator for tabletop role-playing games.

This package provides:
- ReferenceTables: Loaded occupation, name, look and bond tables
- DiceRoller: Seedable dice rolling
- VillagerGenerator: Builds complete Villager records
- render_villagers: Prints villagers as styled terminal cards
"""

from villagers.data_models import Ability, ReferenceRow, Species, Villager
from villagers.dice import DiceResult, DiceRoller, roll
from villagers.gear import expand_gear_template, register_token, split_gear_items
from villagers.generator import (
    VillagerGenerator,
    fill_bond,
    format_modifier,
    get_heritage_moves,
    get_modifier,
)
from villagers.render import build_card, render_villagers
from villagers.table_loader import (
    LoadError,
    MalformedRowError,
    OccupationRow,
    ReferenceTables,
    parse_range,
    read_tsv,
)

__all__ = [
    # Data structures
    "Ability",
    "ReferenceRow",
    "Species",
    "Villager",
    # Dice
    "DiceResult",
    "DiceRoller",
    "roll",
    # Gear
    "expand_gear_template",
    "register_token",
    "split_gear_items",
    # Generator
    "VillagerGenerator",
    "fill_bond",
    "format_modifier",
    "get_heritage_moves",
    "get_modifier",
    # Rendering
    "build_card",
    "render_villagers",
    # Tables
    "LoadError",
    "MalformedRowError",
    "OccupationRow",
    "ReferenceTables",
    "parse_range",
    "read_tsv",
]
