"""
Guide generation pipeline.

validate request -> enrich input -> build prompt -> call the text-generation
API -> wrap the guide with metadata. One request runs as one sequential pass;
the only shared state is the generator, which is read-only.
"""

import logging
from datetime import UTC, datetime

from prompts.guide_prompts import build_prompt
from wow_guide.exceptions import InvalidRequestError
from wow_guide.fetcher import enriched_prompt_input, fetch_item_data
from wow_guide.llm import GuideGenerator
from wow_guide.models import (
    VALID_CATEGORIES,
    GuideMetadata,
    GuideRequest,
    GuideResult,
    ValidationPreview,
)

log = logging.getLogger(__name__)

_PREVIEW_DEFAULT_CATEGORY = "mount"


def validate_guide_request(category: str | None, raw_input: str | None) -> GuideRequest:
    if not category or not raw_input or not raw_input.strip():
        raise InvalidRequestError("Missing required fields: type and input")
    if category not in VALID_CATEGORIES:
        raise InvalidRequestError(f"Invalid type. Must be one of: {', '.join(VALID_CATEGORIES)}")
    return GuideRequest(category=category, raw_input=raw_input.strip())


class GuideService:
    def __init__(self, generator: GuideGenerator, language: str = "Polish"):
        self.generator = generator
        self.language = language

    @property
    def model(self) -> str:
        return self.generator.model

    def create_guide(self, request: GuideRequest) -> GuideResult:
        item_data = fetch_item_data(request.raw_input, request.category)
        prompt = build_prompt(request.category, enriched_prompt_input(item_data), self.language)

        log.info("Generating %s guide for '%s'", request.category, request.raw_input)
        guide = self.generator.generate(prompt)

        return GuideResult(
            category=request.category,
            raw_input=request.raw_input,
            guide=guide,
            metadata=GuideMetadata(
                item_data=item_data,
                timestamp=datetime.now(UTC).isoformat(),
                model=self.model,
            ),
        )

    def preview(self, raw_input: str, category: str | None = None) -> ValidationPreview:
        return preview_input(raw_input, category)


def preview_input(raw_input: str, category: str | None = None) -> ValidationPreview:
    """Enrich ``raw_input`` without calling the model. ``category`` defaults to mount."""
    category = category or _PREVIEW_DEFAULT_CATEGORY
    item_data = fetch_item_data(raw_input, category)
    has_item_id = item_data.extracted_id is not None

    if item_data.fallback:
        message = f"Item data unavailable ({item_data.error}), using raw input"
    elif has_item_id:
        message = f"Wowhead {item_data.id_kind} ID {item_data.extracted_id} extracted from URL"
    else:
        message = "Search term - the guide will be generated with an AI lookup"

    return ValidationPreview(
        has_wowhead_data=item_data.data_available,
        has_item_id=has_item_id,
        item_data=item_data,
        can_process=category in VALID_CATEGORIES,
        message=message,
    )
