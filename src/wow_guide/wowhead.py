"""
Wowhead URL parsing for collectible lookups.

Players usually paste either a collectible name or a Wowhead link. Links
carry the numeric item or spell ID in the path (``/item=12345`` or
``/spell/12345``), which is pulled out here so the guide prompt can name the
exact collectible. Nothing is fetched from Wowhead itself.
"""

import logging
import re

from wow_guide.models import DetailLinks, IdKind

log = logging.getLogger(__name__)

_BASE_URL = "https://www.wowhead.com"
_DOMAIN_MARKER = "wowhead.com"

# IDs longer than 18 digits are not real Wowhead IDs and count as absent.
_ITEM_ID_PATTERN = re.compile(r"/item[=/](\d{1,18})(?!\d)", re.IGNORECASE)
_SPELL_ID_PATTERN = re.compile(r"/spell[=/](\d{1,18})(?!\d)", re.IGNORECASE)


def _extract(pattern: re.Pattern[str], text: object) -> int | None:
    if not isinstance(text, str):
        return None
    match = pattern.search(text)
    if not match:
        return None
    value = int(match.group(1))
    return value if value > 0 else None


def extract_item_id(text: object) -> int | None:
    return _extract(_ITEM_ID_PATTERN, text)


def extract_spell_id(text: object) -> int | None:
    return _extract(_SPELL_ID_PATTERN, text)


def extract_identifier(text: object) -> tuple[int, IdKind] | None:
    """Return the item ID, or failing that the spell ID, found in ``text``."""
    item_id = extract_item_id(text)
    if item_id is not None:
        return item_id, "item"
    spell_id = extract_spell_id(text)
    if spell_id is not None:
        return spell_id, "spell"
    return None


def is_wowhead_input(text: object) -> bool:
    return isinstance(text, str) and _DOMAIN_MARKER in text.lower()


def build_detail_links(identifier: int, kind: IdKind = "item") -> DetailLinks:
    if identifier <= 0:
        raise ValueError(f"Invalid Wowhead ID: {identifier}")
    page = f"{_BASE_URL}/{kind}={identifier}"
    return DetailLinks(
        wowhead_link=page,
        wowhead_comments_link=f"{page}#comments",
        wowhead_guides_link=f"{page}#guides",
    )
