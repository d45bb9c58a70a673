"""
Test helpers for the villager generator test suite.

Provides small, predictable reference tables and a function that writes
them to disk so they load through the real table loader.
"""

from pathlib import Path


# =============================================================================
# FIXTURE TABLE CONTENT
# =============================================================================

FIXTURE_OCCUPATIONS = [
    ("d100", "Occupation", "Gear", "Species"),
    ("1-25", "Farmer", "hoe (1 wt), {2d6} bags of {crop} seed", ""),
    ("26-50", "Stonecutter", "chisel, mallet", "Dwarf"),
    ("51-75", "Herbalist", "herb pouch, {1d4} poultices", "Elf"),
    ("76-99", "Cook", "pan (1 wt), {poultry}", "Halfling"),
    ("100", "Elder", "walking stick", ""),
]

FIXTURE_NAMES = [("d20", "A", "B", "C", "Elf", "Dwarf", "Halfling")] + [
    (str(i), f"A{i}", f"B{i}", f"C{i}", f"Elf{i}", f"Dwarf{i}", f"Halfling{i}")
    for i in range(1, 21)
]

FIXTURE_LOOKS = [("d20", "Face", "Eyes", "Hair", "Body", "Clothing")] + [
    (str(i), f"Face{i}", f"Eyes{i}", f"Hair{i}", f"Body{i}", f"Clothes{i}")
    for i in range(1, 21)
]

FIXTURE_BONDS = [("Bond", "1", "2", "3", "4")] + [
    (f"Bond {i} saved my ... from ruin", f"farm{i}", f"family{i}", f"name{i}", f"shop{i}")
    for i in range(1, 21)
]


def write_table(directory: Path, name: str, rows) -> Path:
    """Write rows as a TSV file and return its path."""
    path = directory / name
    path.write_text("\n".join("\t".join(row) for row in rows) + "\n", encoding="utf-8")
    return path


def write_fixture_tables(directory: Path, **overrides) -> Path:
    """
    Write the four fixture tables to a directory.

    Keyword arguments replace a table's rows, e.g. occupations=[...].
    """
    tables = {
        "occupations": FIXTURE_OCCUPATIONS,
        "names": FIXTURE_NAMES,
        "looks": FIXTURE_LOOKS,
        "bonds": FIXTURE_BONDS,
    }
    tables.update(overrides)
    for name, rows in tables.items():
        write_table(directory, f"{name}.tsv", rows)
    return directory


class ScriptedRandom:
    """
    Stand-in for random.Random that returns scripted randint results.

    Lets a test fix the exact sequence of dice a generator sees.
    """

    def __init__(self, values):
        self._values = list(values)
        self.calls = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        value = self._values.pop(0)
        assert a <= value <= b, f"scripted value {value} outside {a}-{b}"
        return value

    def seed(self, seed) -> None:
        pass

    @property
    def remaining(self) -> int:
        return len(self._values)
