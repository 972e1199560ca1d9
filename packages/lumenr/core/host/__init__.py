"""Host collaborator contracts and glue around the light pipeline."""

from lumenr.core.host.changes import (
    entity_change_requires_refresh,
    has_path,
    item_change_requires_refresh,
)
from lumenr.core.host.items import extract_description, get_path, is_equipped
from lumenr.core.host.protocols import LightEntity, TokenSink

# Note: refresher not imported here to avoid a circular import with parsers.
# Import directly: from lumenr.core.host.refresher import EntityLightRefresher

__all__ = [
    "LightEntity",
    "TokenSink",
    "entity_change_requires_refresh",
    "extract_description",
    "get_path",
    "has_path",
    "is_equipped",
    "item_change_requires_refresh",
]
