"""
Reference table loader for the villager generator.

Reads the four tab-separated reference tables (occupations, names, looks,
bonds) shipped in villagers/data and validates that they are well formed.
The resulting ReferenceTables object is read-only and is handed to the
generator explicitly.

Usage:
    tables = ReferenceTables.load()
    generator = VillagerGenerator(tables)
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from villagers.data_models import ReferenceRow

logger = logging.getLogger(__name__)


DATA_DIR = Path(__file__).parent / "data"

OCCUPATIONS_FILE = "occupations.tsv"
NAMES_FILE = "names.tsv"
LOOKS_FILE = "looks.tsv"
BONDS_FILE = "bonds.tsv"

# Minimum number of columns each table's rows must carry
MIN_COLUMNS = {
    OCCUPATIONS_FILE: 3,
    NAMES_FILE: 7,
    LOOKS_FILE: 6,
    BONDS_FILE: 5,
}

# Tables rolled on with a d20 need a row for every result
D20_TABLES = (NAMES_FILE, LOOKS_FILE, BONDS_FILE)

BOND_PLACEHOLDER = "..."


class LoadError(Exception):
    """Raised when a reference table is missing or unreadable."""

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"Failed to load {path}: {message}")


class MalformedRowError(LoadError):
    """Raised when a reference table row does not fit its table's layout."""

    def __init__(self, path: Path, row_number: int, message: str):
        self.table = path.name
        self.row_number = row_number
        super().__init__(path, f"row {row_number}: {message}")


def read_tsv(name: str, data_dir: Optional[Path] = None) -> list[ReferenceRow]:
    """
    Read a tab-separated resource into rows of text fields.

    The header row is included; callers discard it.

    Args:
        name: File name of the resource
        data_dir: Directory holding the resource (package data if None)

    Returns:
        List of rows, each a tuple of column strings

    Raises:
        LoadError: If the resource is missing or unreadable
    """
    path = Path(data_dir or DATA_DIR) / name
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(path, str(e)) from e

    rows = [tuple(line.rstrip("\r").split("\t")) for line in text.strip().split("\n")]
    logger.debug("Read %d lines from %s", len(rows), path)
    return rows


def parse_range(text: str) -> tuple[int, int]:
    """
    Parse an occupation range column.

    "5-9" gives (5, 9); a single number "42" gives (42, 42).

    Raises:
        ValueError: If the text is not one or two integers
    """
    parts = text.strip().split("-")
    if len(parts) == 1:
        value = int(parts[0])
        return value, value
    if len(parts) == 2:
        return int(parts[0]), int(parts[1])
    raise ValueError(f"Invalid range: {text!r}")


@dataclass(frozen=True)
class OccupationRow:
    """A parsed row of the occupation table."""
    min_roll: int
    max_roll: int
    name: str
    gear_template: str
    species_tag: str = ""

    def matches(self, roll: int) -> bool:
        """True if the d100 roll falls in this row's inclusive range."""
        return self.min_roll <= roll <= self.max_roll


@dataclass(frozen=True)
class ReferenceTables:
    """
    Read-only lookup data for villager generation.

    Attributes:
        occupations: Parsed occupation rows, in table order
        names: Name table rows (header removed)
        looks: Look table rows (header removed)
        bonds: Bond table rows (header removed)
    """
    occupations: tuple[OccupationRow, ...]
    names: tuple[ReferenceRow, ...]
    looks: tuple[ReferenceRow, ...]
    bonds: tuple[ReferenceRow, ...]

    @classmethod
    def load(cls, data_dir: Optional[Path] = None) -> "ReferenceTables":
        """
        Load and validate all four reference tables.

        Args:
            data_dir: Directory holding the TSV files (package data if None)

        Raises:
            LoadError: If a table is missing or unreadable
            MalformedRowError: If a table is not well formed
        """
        directory = Path(data_dir or DATA_DIR)
        raw = {}
        for name in (OCCUPATIONS_FILE, NAMES_FILE, LOOKS_FILE, BONDS_FILE):
            _, *rows = read_tsv(name, directory)
            _check_columns(directory / name, rows, MIN_COLUMNS[name])
            raw[name] = tuple(rows)

        for name in D20_TABLES:
            if len(raw[name]) < 20:
                raise MalformedRowError(
                    directory / name,
                    len(raw[name]) + 1,
                    f"expected 20 rows, found {len(raw[name])}",
                )

        for row_number, row in enumerate(raw[BONDS_FILE], start=2):
            if BOND_PLACEHOLDER not in row[0]:
                raise MalformedRowError(
                    directory / BONDS_FILE, row_number,
                    f"bond template has no '{BOND_PLACEHOLDER}' placeholder",
                )

        occupations = _parse_occupations(directory / OCCUPATIONS_FILE, raw[OCCUPATIONS_FILE])

        tables = cls(
            occupations=occupations,
            names=raw[NAMES_FILE],
            looks=raw[LOOKS_FILE],
            bonds=raw[BONDS_FILE],
        )
        logger.info(
            "Loaded reference tables from %s: %d occupations, %d names, %d looks, %d bonds",
            directory,
            len(tables.occupations),
            len(tables.names),
            len(tables.looks),
            len(tables.bonds),
        )
        return tables

    def find_occupation(self, roll: int) -> OccupationRow:
        """
        Find the first occupation whose range contains a d100 roll.

        Raises:
            LookupError: If no row covers the roll
        """
        for occupation in self.occupations:
            if occupation.matches(roll):
                return occupation
        raise LookupError(f"No occupation covers d100 roll {roll}")


def _check_columns(path: Path, rows: list[ReferenceRow], min_columns: int) -> None:
    """Ensure every data row has enough columns. Row numbers are 1-based, header is row 1."""
    for row_number, row in enumerate(rows, start=2):
        if len(row) < min_columns:
            raise MalformedRowError(
                path, row_number,
                f"expected at least {min_columns} columns, found {len(row)}",
            )


def _parse_occupations(path: Path, rows: tuple[ReferenceRow, ...]) -> tuple[OccupationRow, ...]:
    """Parse occupation rows and check that every d100 result is covered."""
    occupations = []
    for row_number, row in enumerate(rows, start=2):
        try:
            min_roll, max_roll = parse_range(row[0])
        except ValueError as e:
            raise MalformedRowError(path, row_number, str(e)) from e
        if not 1 <= min_roll <= max_roll <= 100:
            raise MalformedRowError(
                path, row_number,
                f"range {row[0]!r} is not within 1-100 in ascending order",
            )
        occupations.append(OccupationRow(
            min_roll=min_roll,
            max_roll=max_roll,
            name=row[1],
            gear_template=row[2],
            species_tag=row[3] if len(row) > 3 else "",
        ))

    covered = set()
    for occupation in occupations:
        covered.update(range(occupation.min_roll, occupation.max_roll + 1))
    missing = sorted(set(range(1, 101)) - covered)
    if missing:
        raise MalformedRowError(
            path, len(rows) + 1,
            f"d100 results not covered by any occupation: {missing}",
        )
    return tuple(occupations)
