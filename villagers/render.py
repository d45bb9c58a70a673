"""
Terminal rendering of villager cards using rich.

Each villager becomes a rounded panel holding the name, look, ability
scores, combat numbers, gear, bond and moves.
"""

from typing import Iterable, Optional

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from villagers.data_models import Ability, Species, Villager
from villagers.generator import format_modifier

SPECIES_COLORS = {
    Species.DWARF: "red",
    Species.ELF: "cyan",
    Species.HALFLING: "green",
    Species.HUMAN: "white",
}

# Abilities shown on each line of the card
STAT_ROWS = [
    (Ability.STR, Ability.DEX, Ability.CON),
    (Ability.INT, Ability.WIS, Ability.CHA),
    (Ability.LUC,),
]

BULLET = "•"


def modifier_style(modifier: int) -> str:
    """Colour for a modifier: green if positive, red if negative, grey otherwise."""
    if modifier > 0:
        return "green"
    if modifier < 0:
        return "red"
    return "bright_black"


def stat_text(ability: Ability, score: int, modifier: int) -> Text:
    """Render one ability as 'STR 12 (+0)'."""
    text = Text()
    text.append(f"{ability.value} ", style="yellow")
    text.append(f"{score:>2}", style="bold")
    text.append(f" ({format_modifier(modifier):>2})", style=modifier_style(modifier))
    return text


def _section(title: str) -> Text:
    return Text(title, style="bold cyan")


def _bullet(content: Text) -> Text:
    return Text.assemble(f" {BULLET} ", content)


def build_stats(villager: Villager) -> Table:
    grid = Table.grid(padding=(0, 2))
    for _ in range(max(len(row) for row in STAT_ROWS)):
        grid.add_column()
    for row in STAT_ROWS:
        grid.add_row(*(
            stat_text(ability, villager.stats[ability], villager.modifiers[ability])
            for ability in row
        ))
    return grid


def build_moves(villager: Villager) -> list[Text]:
    """Heritage moves tagged with the species, then Know Your Stuff."""
    color = SPECIES_COLORS[villager.species]
    *heritage, universal = villager.moves
    lines = [
        _bullet(Text.assemble((f"({villager.species.value})", color), f" {move}"))
        for move in heritage
    ]
    title, _, body = universal.partition(":")
    lines.append(_bullet(Text.assemble((f"{title}:", "bold"), body)))
    return lines


def build_card(villager: Villager) -> Panel:
    """
    Build the rich panel for a single villager.

    Args:
        villager: Villager to display

    Returns:
        A Panel ready to print
    """
    header = Text.assemble(
        (villager.name, "bold yellow"),
        " the ",
        (villager.occupation, "bold"),
    )

    numbers = Text.assemble(
        ("HP", "bold red"), f" {villager.hp}   ",
        ("Load", "bold blue"), f" {villager.load}   ",
        ("Damage", "bold magenta"), f" {villager.damage}",
    )

    body = Group(
        header,
        Text(""),
        Text(villager.look, style="dim"),
        Text(""),
        build_stats(villager),
        Text(""),
        numbers,
        Text(""),
        _section("GEAR"),
        *(_bullet(Text(item)) for item in villager.gear_items),
        Text(""),
        _section("BOND"),
        Text(f" {villager.bond}"),
        Text(""),
        _section("MOVES"),
        *build_moves(villager),
    )
    return Panel(body, box=box.ROUNDED, border_style="yellow", padding=(1, 2))


def render_villagers(villagers: Iterable[Villager], console: Optional[Console] = None) -> None:
    """Print a card for each villager. An empty list prints nothing."""
    console = console or Console()
    for villager in villagers:
        console.print(build_card(villager))
        console.print()
