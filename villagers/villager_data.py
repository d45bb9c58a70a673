"""
Static villager data that does not live in the reference tables.

Contains the option lists used by gear template tokens, the heritage move
texts for each non-human species, and the move every villager knows.
"""


# =============================================================================
# GEAR TOKEN OPTIONS
# =============================================================================

# {crop}, rolled on d10
CROPS = [
    "barley",
    "onions",
    "peppers",
    "potatoes",
    "squash",
    "rice",
    "wheat",
    "hops",
    "beets",
    "oats",
]

# {instrument}, rolled on d8
INSTRUMENTS = [
    "accordion (2 wt)",
    "drum (1 wt)",
    "fiddle (1 wt)",
    "flute",
    "guitar (1 wt)",
    "mbira",
    "horn (1 wt)",
    "banjo (1 wt)",
]

# {animal_trainer_gear}, rolled on d4
ANIMAL_TRAINER_GEAR = [
    "leather gauntlet, falcon",
    "2 dogs, leashes",
    "monkey, music box (2 wt)",
    "cage (1 wt), 2 ferrets",
]

# {poultry}, rolled on d4; each entry is (count dice sides, bird)
POULTRY = [
    (6, "chickens"),
    (6, "ducks"),
    (4, "geese"),
    (4, "swans"),
]


# =============================================================================
# MOVES
# =============================================================================

DWARF_MOVE = (
    "Etched in Stone: When you appraise an artificial item, object, or "
    "location, the GM will tell you something interesting about the one who "
    "made it, no questions asked."
)

ELF_MOVE = (
    "These Elf Eyes: You see perfectly in the barest light and may focus "
    "your senses to Detect Magic at will."
)

HALFLING_MOVE = (
    "Lucky: When you Tempt Fate and score a 10+ you don't suffer "
    "disadvantage and on a 12+ your luck rubs off; the nearest ally gains "
    "advantage on their next roll."
)

KNOW_YOUR_STUFF = (
    "Know Your Stuff: When you Spout Lore or Discern Realities about "
    "something related to your occupation, tell the GM why you deserve "
    "advantage and take it if they agree. When you have the resources to do "
    "something you know how to do, you do it."
)
