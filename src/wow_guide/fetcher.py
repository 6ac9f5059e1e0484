"""
Item data enrichment for guide requests.

Turns the raw player input into an ``ItemData`` record before the prompt is
built:

1. Detect a Wowhead link and extract its item/spell ID
2. Attach Wowhead detail links when an ID was found
3. Attach the static category description
4. Consult Battle.net when an ID was found (optional, usually skipped)
5. Summarize what the guide generator can rely on

Enrichment is best effort. Any unexpected failure is folded into a result
with ``fallback=True`` so guide generation can continue from the raw input.
"""

import logging
from datetime import UTC, datetime

from wow_guide import battlenet, wowhead
from wow_guide.categories import get_category_details
from wow_guide.models import EnrichmentSummary, ItemData

log = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(UTC).isoformat()


def _summarize(item_data: ItemData) -> EnrichmentSummary:
    has_id = item_data.extracted_id is not None
    return EnrichmentSummary(
        has_item_id=has_id,
        has_wowhead_data=item_data.data_available,
        can_generate_guide=True,
        recommended_action=(
            "Can fetch detailed data from Wowhead" if has_id else "Will use AI search to find item"
        ),
    )


def _fallback_item_data(raw_input: object, category: object, error: Exception) -> ItemData:
    return ItemData(
        original_input=raw_input if isinstance(raw_input, str) else str(raw_input),
        category=category if isinstance(category, str) else str(category),
        type_details=get_category_details(category),
        timestamp=_now_iso(),
        fallback=True,
        error=str(error),
    )


def fetch_item_data(raw_input: str, category: str) -> ItemData:
    try:
        result = ItemData(
            original_input=raw_input,
            category=category,
            type_details=get_category_details(category),
            timestamp=_now_iso(),
        )

        identifier = None
        if wowhead.is_wowhead_input(raw_input):
            identifier = wowhead.extract_identifier(raw_input)

        if identifier is not None:
            item_id, kind = identifier
            log.info("Input '%s': extracted Wowhead %s ID %d", raw_input, kind, item_id)
            result.extracted_id = item_id
            result.id_kind = kind
            result.source_kind = "wowhead-url"
            result.data_available = True
            result.detail_links = wowhead.build_detail_links(item_id, kind)
            result.secondary_data = battlenet.fetch_battlenet_data(item_id)
        else:
            log.info("Input '%s': treating as free-text search term", raw_input)
            result.source_kind = "free-text"
            result.data_available = False

        result.summary = _summarize(result)
        return result

    except Exception as e:
        log.exception("Enrichment failed for input '%s'", raw_input)
        return _fallback_item_data(raw_input, category, e)


def enriched_prompt_input(item_data: ItemData) -> str:
    if item_data.extracted_id is None:
        return item_data.original_input
    kind = item_data.id_kind or "item"
    return f"{item_data.original_input} (Wowhead {kind} ID: {item_data.extracted_id})"
