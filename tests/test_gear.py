"""
Tests for gear template expansion and gear item splitting.
"""

import logging
import re

import pytest

from villagers.gear import (
    TOKEN_REGISTRY,
    expand_gear_template,
    register_token,
    split_gear_items,
)
from villagers.villager_data import ANIMAL_TRAINER_GEAR, CROPS, INSTRUMENTS

SUPPORTED_TOKEN = re.compile(
    r"\{(\d+d\d+|\d+\+\d+d\d+\*\d+|crop|instrument|animal_trainer_gear|poultry)\}"
)


class TestExpandGearTemplate:
    """Tests for expand_gear_template."""

    @pytest.mark.parametrize("text", [
        "hoe (1 wt), sickle",
        "",
        "a plain walking stick",
        "{unknown} stays put",
    ])
    def test_literal_text_unchanged(self, seeded_dice, text):
        """Text without supported tokens passes through untouched."""
        assert expand_gear_template(text, seeded_dice) == text

    def test_dice_token(self, seeded_dice):
        """{NdS} becomes a sum in range."""
        for _ in range(50):
            result = expand_gear_template("{2d6} nails", seeded_dice)
            count, rest = result.split(" ", 1)
            assert rest == "nails"
            assert 2 <= int(count) <= 12

    def test_scaled_dice_token(self, seeded_dice):
        """{2+1d4*2} is 2 plus twice a d4: one of 4, 6, 8, 10."""
        seen = set()
        for _ in range(200):
            result = expand_gear_template("{2+1d4*2} yards of rope", seeded_dice)
            seen.add(int(result.split(" ")[0]))
        assert seen == {4, 6, 8, 10}

    def test_crop_token(self, seeded_dice):
        """{crop} picks from the crop list."""
        for _ in range(50):
            assert expand_gear_template("{crop}", seeded_dice) in CROPS

    def test_instrument_token(self, seeded_dice):
        """{instrument} picks from the instrument list."""
        for _ in range(50):
            assert expand_gear_template("{instrument}", seeded_dice) in INSTRUMENTS

    def test_animal_trainer_token(self, seeded_dice):
        """{animal_trainer_gear} picks one of the four kits."""
        for _ in range(50):
            assert expand_gear_template("{animal_trainer_gear}", seeded_dice) in ANIMAL_TRAINER_GEAR

    def test_poultry_token(self, seeded_dice):
        """{poultry} is a bird count with a count suited to the bird."""
        limits = {"chickens": 6, "ducks": 6, "geese": 4, "swans": 4}
        seen = set()
        for _ in range(200):
            count, bird = expand_gear_template("{poultry}", seeded_dice).split(" ")
            assert 1 <= int(count) <= limits[bird]
            seen.add(bird)
        assert seen == set(limits)

    def test_multiple_tokens_all_replaced(self, seeded_dice):
        """Every token in one template is substituted."""
        template = "{2d6} bags of {crop} seed, {1d4} jars, {poultry}, {instrument}, {2+1d4*2} rope"
        for _ in range(50):
            result = expand_gear_template(template, seeded_dice)
            assert "{" not in result
            assert "}" not in result

    def test_repeated_token_rolled_independently(self, seeded_dice):
        """Each occurrence of a token gets its own roll."""
        results = set()
        for _ in range(20):
            results.add(expand_gear_template("{1d100} {1d100}", seeded_dice))
        assert any(left != right for left, right in (r.split(" ") for r in results))

    def test_no_residual_supported_tokens_on_bundled_tables(self, bundled_tables, seeded_dice):
        """Expanding every bundled gear template leaves no supported token."""
        for occupation in bundled_tables.occupations:
            for _ in range(10):
                expanded = expand_gear_template(occupation.gear_template, seeded_dice)
                assert not SUPPORTED_TOKEN.search(expanded), occupation.name
                assert "{" not in expanded, occupation.name


class TestRegisterToken:
    """Tests for adding new tokens to the registry."""

    def test_registered_token_is_expanded(self, seeded_dice):
        """A newly registered resolver is used without changing the expansion loop."""
        @register_token("weather", r"\{weather\}")
        def _resolve_weather(match, dice):
            return dice.choice(["rain", "sun"], "weather")

        try:
            assert expand_gear_template("cloak for {weather}", seeded_dice) in (
                "cloak for rain",
                "cloak for sun",
            )
        finally:
            TOKEN_REGISTRY.pop()

    def test_registration_logged(self, caplog):
        """Registering a token logs its name."""
        with caplog.at_level(logging.DEBUG, logger="villagers.gear"):
            register_token("tide", r"\{tide\}")(lambda match, dice: "low")
        TOKEN_REGISTRY.pop()
        assert "'tide'" in caplog.text

    def test_expansion_logs_token_name(self, seeded_dice, caplog):
        """Each expanded token is logged by name with its count."""
        with caplog.at_level(logging.DEBUG, logger="villagers.gear"):
            expand_gear_template("{crop} and {crop}, {1d4} sacks", seeded_dice)
        assert "Expanded 2 'crop' token(s)" in caplog.text
        assert "Expanded 1 'dice' token(s)" in caplog.text
        assert "'instrument'" not in caplog.text


class TestSplitGearItems:
    """Tests for split_gear_items."""

    def test_parenthesised_commas_kept(self):
        """Commas inside parentheses do not split."""
        assert split_gear_items("cage (1 wt), 2 ferrets") == ["cage (1 wt)", "2 ferrets"]

    def test_nested_commas(self):
        """A comma inside the parentheses stays with its item."""
        assert split_gear_items("sacks (1 wt, each), rope") == ["sacks (1 wt, each)", "rope"]

    def test_plain_commas_split(self):
        """Top-level commas separate items and whitespace is trimmed."""
        assert split_gear_items("2 dogs,  leashes ") == ["2 dogs", "leashes"]

    def test_single_item(self):
        """A string without commas is one item."""
        assert split_gear_items("walking stick") == ["walking stick"]

    def test_trailing_comma(self):
        """A trailing comma does not produce an empty item."""
        assert split_gear_items("hoe, sickle,") == ["hoe", "sickle"]

    def test_empty(self):
        """An empty string has no items."""
        assert split_gear_items("") == []
