"""
Battle.net Game Data API lookup.

Optional enrichment for inputs that resolved to a Wowhead ID. The lookup needs
Battle.net OAuth client credentials; without them it is skipped. The OAuth
flow itself is not implemented, so even with credentials no data comes back
and guides are generated from the Wowhead ID alone.
"""

import logging

from wow_guide.config import get_settings

log = logging.getLogger(__name__)

_API_URL_TEMPLATE = "https://{region}.api.blizzard.com/data/wow/item/{item_id}"


def credentials_configured() -> bool:
    settings = get_settings()
    return bool(settings.blizzard_client_id and settings.blizzard_client_secret)


def fetch_battlenet_data(item_id: int, region: str | None = None) -> dict | None:
    if not credentials_configured():
        log.warning("Battle.net API credentials not configured, skipping item %d", item_id)
        return None

    region = region or get_settings().blizzard_region
    # TODO: exchange client credentials for an OAuth token and GET this URL
    log.info(
        "Battle.net lookup for item %d not available yet (%s)",
        item_id,
        _API_URL_TEMPLATE.format(region=region, item_id=item_id),
    )
    return None
