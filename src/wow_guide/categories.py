"""Static descriptions of the collectible categories a guide can be requested for."""

from types import MappingProxyType

from wow_guide.models import CategoryDetails

_DEFAULT_CATEGORY = "mount"

CATEGORY_DETAILS: MappingProxyType[str, CategoryDetails] = MappingProxyType(
    {
        "mount": CategoryDetails(
            label="Mount",
            icon="🐴",
            description="Rideable mount that increases travel speed",
            typical_sources=("Dungeon Drop", "Raid Boss", "Achievement", "Vendor", "World Drop"),
            difficulty_range="Varies (Easy to Mythic)",
        ),
        "toy": CategoryDetails(
            label="Toy",
            icon="🎮",
            description="Fun item for your Toy Box collection",
            typical_sources=("Quest Reward", "Vendor", "World Drop", "Event"),
            difficulty_range="Varies",
        ),
        "pet": CategoryDetails(
            label="Battle Pet",
            icon="🐾",
            description="Companion pet for pet battles",
            typical_sources=("Wild Capture", "Vendor", "Drop", "Achievement"),
            difficulty_range="Varies",
        ),
        "decor": CategoryDetails(
            label="Transmog/Cosmetic",
            icon="✨",
            description="Cosmetic item for transmogrification",
            typical_sources=("Dungeon", "Raid", "PvP", "Vendor"),
            difficulty_range="Varies",
        ),
    }
)


def get_category_details(category: str) -> CategoryDetails:
    # Unknown categories get the mount record instead of an error.
    if not isinstance(category, str):
        return CATEGORY_DETAILS[_DEFAULT_CATEGORY]
    return CATEGORY_DETAILS.get(category, CATEGORY_DETAILS[_DEFAULT_CATEGORY])
