"""Tests for guide prompt templates."""

import pytest

from prompts.guide_prompts import (
    PROMPT_BUILDERS,
    build_decor_prompt,
    build_mount_prompt,
    build_pet_prompt,
    build_prompt,
)
from wow_guide.models import VALID_CATEGORIES

_CLOSING = "Respond ONLY with the numbered list. No extra text, no apologies."


def test_every_category_has_a_builder():
    assert set(PROMPT_BUILDERS) == set(VALID_CATEGORIES)


@pytest.mark.parametrize("category", VALID_CATEGORIES)
def test_prompt_structure(category):
    prompt = build_prompt(category, "Some Collectible")

    assert '"Some Collectible"' in prompt
    assert "numbered list" in prompt
    assert "NO lore" in prompt
    assert "POLISH LANGUAGE" in prompt
    assert "Wowhead" in prompt
    assert prompt.rstrip().endswith(_CLOSING)


def test_pet_prompt_mentions_pet_battles():
    prompt = build_pet_prompt("Mr. Pinchy")

    assert "pet battle" in prompt.lower()
    assert prompt.rstrip().endswith(_CLOSING)


def test_decor_prompt_mentions_transmogrification():
    prompt = build_decor_prompt("Tier 2 set")

    assert "transmogrification" in prompt.lower()
    assert prompt.rstrip().endswith(_CLOSING)


def test_mount_prompt_breaks_down_achievements():
    assert "break down ALL steps of that achievement" in build_mount_prompt("Invincible")


def test_language_is_configurable():
    prompt = build_prompt("toy", "Toy Train Set", language="German")

    assert "GERMAN LANGUAGE" in prompt
    assert "Write every step in German" in prompt


def test_prompt_is_deterministic():
    assert build_prompt("mount", "Invincible") == build_prompt("mount", "Invincible")


def test_input_with_braces_is_kept_verbatim():
    assert '"{weird} input"' in build_prompt("mount", "{weird} input")


def test_unknown_category_raises():
    with pytest.raises(KeyError):
        build_prompt("spaceship", "Millennium Falcon")
