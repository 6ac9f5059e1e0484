"""Pydantic models for guide requests, item enrichment and generated guides."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

# --- Categories ---

Category = Literal["mount", "toy", "pet", "decor"]

VALID_CATEGORIES: tuple[str, ...] = ("mount", "toy", "pet", "decor")

SourceKind = Literal["wowhead-url", "free-text"]

IdKind = Literal["item", "spell"]


class CategoryDetails(BaseModel):
    label: str
    icon: str = Field(min_length=1)
    description: str = Field(min_length=1)
    typical_sources: tuple[str, ...] = Field(alias="typicalSources", min_length=1)
    difficulty_range: str = Field(alias="difficultyRange")
    collectible: bool = True

    model_config = {"populate_by_name": True, "frozen": True}


# --- Enrichment ---


class DetailLinks(BaseModel):
    wowhead_link: str = Field(alias="wowheadLink")
    wowhead_comments_link: str = Field(alias="wowheadCommentsLink")
    wowhead_guides_link: str = Field(alias="wowheadGuidesLink")

    model_config = {"populate_by_name": True}


class EnrichmentSummary(BaseModel):
    has_item_id: bool = Field(alias="hasItemId")
    has_wowhead_data: bool = Field(alias="hasWowheadData")
    can_generate_guide: bool = Field(default=True, alias="canGenerateGuide")
    recommended_action: str = Field(alias="recommendedAction")

    model_config = {"populate_by_name": True}


class ItemData(BaseModel):
    original_input: str = Field(alias="originalInput")
    category: str = Field(alias="type")
    extracted_id: int | None = Field(default=None, alias="extractedId", gt=0)
    id_kind: IdKind | None = Field(default=None, alias="idKind")
    source_kind: SourceKind = Field(default="free-text", alias="sourceKind")
    data_available: bool = Field(default=False, alias="dataAvailable")
    detail_links: DetailLinks | None = Field(default=None, alias="detailLinks")
    secondary_data: dict | None = Field(default=None, alias="secondaryData")
    type_details: CategoryDetails = Field(alias="typeDetails")
    summary: EnrichmentSummary | None = None
    timestamp: str
    fallback: bool = False
    error: str | None = None

    model_config = {"populate_by_name": True}


# --- Guides ---


class GuideRequest(BaseModel):
    category: Category = Field(alias="type")
    raw_input: str = Field(alias="input", min_length=1)

    model_config = {"populate_by_name": True, "frozen": True}


class GuideMetadata(BaseModel):
    item_data: ItemData = Field(alias="itemData")
    timestamp: str
    model: str

    model_config = {"populate_by_name": True}


class GuideResult(BaseModel):
    category: Category = Field(alias="type")
    raw_input: str = Field(alias="input")
    guide: str = Field(min_length=1)
    metadata: GuideMetadata

    model_config = {"populate_by_name": True}


class ValidationPreview(BaseModel):
    valid: bool = True
    has_wowhead_data: bool = Field(alias="hasWowheadData")
    has_item_id: bool = Field(alias="hasItemId")
    item_data: ItemData = Field(alias="itemData")
    can_process: bool = Field(alias="canProcess")
    message: str

    model_config = {"populate_by_name": True}


# --- HTTP bodies ---


class GuideRequestBody(BaseModel):
    type: str | None = None
    input: str | None = None


class ValidateRequestBody(BaseModel):
    input: str | None = None
    type: str | None = None
