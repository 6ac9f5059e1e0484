"""Tests for Wowhead URL parsing."""

import pytest

from wow_guide import wowhead


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://www.wowhead.com/item=12345", 12345),
        ("https://www.wowhead.com/item=12345/invincibles-reins", 12345),
        ("https://www.wowhead.com/item/50818", 50818),
        ("https://www.wowhead.com/ITEM=777", 777),
        ("https://www.wowhead.com/Item/42-some-name", 42),
        ("https://www.wowhead.com/pl/item=32458/ashes-of-alar", 32458),
    ],
)
def test_extract_item_id(url, expected):
    assert wowhead.extract_item_id(url) == expected


@pytest.mark.parametrize(
    "text",
    [
        "Invincible",
        "https://www.wowhead.com/npc=36597/the-lich-king",
        "https://www.wowhead.com/item=",
        "item=12345",
        "https://www.wowhead.com/item=0",
        "https://www.wowhead.com/item=" + "9" * 5000,
        "https://www.wowhead.com/item=" + "1" * 19,
        "",
    ],
)
def test_extract_item_id_absent(text):
    assert wowhead.extract_item_id(text) is None


def test_extract_item_id_returns_first_match():
    assert wowhead.extract_item_id("https://x.com/item=11/y/item=22") == 11


def test_extract_item_id_non_string():
    assert wowhead.extract_item_id(None) is None
    assert wowhead.extract_item_id(12345) is None


def test_extract_spell_id():
    assert wowhead.extract_spell_id("https://www.wowhead.com/spell=72286/invincible") == 72286
    assert wowhead.extract_spell_id("https://www.wowhead.com/SPELL/72286") == 72286
    assert wowhead.extract_spell_id("https://www.wowhead.com/item=50818") is None


def test_extract_identifier_prefers_item():
    assert wowhead.extract_identifier("https://www.wowhead.com/item=50818") == (50818, "item")
    assert wowhead.extract_identifier("https://www.wowhead.com/spell=72286") == (72286, "spell")
    assert wowhead.extract_identifier("https://www.wowhead.com/npc=1") is None


def test_is_wowhead_input():
    assert wowhead.is_wowhead_input("https://www.wowhead.com/item=1")
    assert wowhead.is_wowhead_input("https://WWW.WOWHEAD.COM/item=1")
    assert not wowhead.is_wowhead_input("https://www.warcraftmounts.com/item=1")
    assert not wowhead.is_wowhead_input(None)


def test_build_detail_links():
    links = wowhead.build_detail_links(12345)

    assert links.wowhead_link == "https://www.wowhead.com/item=12345"
    assert links.wowhead_comments_link == "https://www.wowhead.com/item=12345#comments"
    assert links.wowhead_guides_link == "https://www.wowhead.com/item=12345#guides"


def test_build_detail_links_spell():
    links = wowhead.build_detail_links(72286, "spell")

    assert links.wowhead_link == "https://www.wowhead.com/spell=72286"


def test_build_detail_links_invalid_id():
    with pytest.raises(ValueError, match="Invalid Wowhead ID"):
        wowhead.build_detail_links(0)
