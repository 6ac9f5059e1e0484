"""
CLI script for generating a collectible acquisition guide locally.

Runs the same pipeline as ``POST /api/guide`` without the HTTP server:
1. Validate the category and input
2. Enrich the input (Wowhead ID, category details)
3. Build the category prompt
4. Generate the guide via the text-generation API
5. Print the steps as a numbered list

With ``--preview`` only steps 1-2 run and the enrichment is printed.
"""

import argparse
import logging
import sys

from wow_guide import terminal
from wow_guide.config import get_settings
from wow_guide.exceptions import ConfigurationError, GenerationError, InvalidRequestError
from wow_guide.formatter import split_guide_steps
from wow_guide.llm import GuideGenerator
from wow_guide.models import VALID_CATEGORIES, ItemData
from wow_guide.service import GuideService, preview_input, validate_guide_request


def _print_item_data(item_data: ItemData) -> None:
    details = item_data.type_details
    terminal.key_value("Category", f"{details.icon} {details.label}")
    terminal.key_value("Source", item_data.source_kind)
    if item_data.extracted_id is not None:
        terminal.key_value(f"Wowhead {item_data.id_kind} ID", str(item_data.extracted_id))
    if item_data.detail_links is not None:
        terminal.key_value("Wowhead", terminal.link(item_data.detail_links.wowhead_link))
    if item_data.fallback:
        terminal.warning(f"Item data unavailable: {item_data.error}")


def run_guide(category: str, raw_input: str, model: str | None = None) -> None:
    settings = get_settings()
    if model:
        settings = settings.model_copy(update={"model": model})

    request = validate_guide_request(category, raw_input)
    service = GuideService(GuideGenerator.from_settings(settings), settings.guide_language)

    result = service.create_guide(request)
    terminal.section_header(f"{result.metadata.item_data.type_details.label}: {result.raw_input}")
    _print_item_data(result.metadata.item_data)
    terminal.info("")
    terminal.numbered_steps(split_guide_steps(result.guide))
    terminal.debug(f"\nGenerated by {result.metadata.model} at {result.metadata.timestamp}")


def run_preview(category: str, raw_input: str) -> None:
    if category not in VALID_CATEGORIES:
        raise InvalidRequestError(f"Invalid type. Must be one of: {', '.join(VALID_CATEGORIES)}")

    preview = preview_input(raw_input, category)

    terminal.section_header(f"Preview: {raw_input}")
    _print_item_data(preview.item_data)
    terminal.success(preview.message)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate a step-by-step acquisition guide for a WoW collectible"
    )
    parser.add_argument("--type", required=True, choices=VALID_CATEGORIES, help="Collectible type")
    parser.add_argument("--input", required=True, help="Collectible name or Wowhead URL")
    parser.add_argument(
        "--preview", action="store_true", help="Only show enrichment, do not call the AI API"
    )
    parser.add_argument("--model", type=str, default=None, help="Override text-generation model")

    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(message)s",
    )

    try:
        if args.preview:
            run_preview(args.type, args.input)
        else:
            run_guide(args.type, args.input, model=args.model)
    except (ConfigurationError, InvalidRequestError, GenerationError) as e:
        terminal.error(str(e))
        sys.exit(1)
    except Exception as e:
        terminal.error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
