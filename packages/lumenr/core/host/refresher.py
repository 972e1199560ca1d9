"""Entity light refresh - recompute and apply an entity's effective light.

The refresher is the seam between host change notifications and the pure
pipeline: it reads the entity's equipped items, parses and combines their
profiles, and pushes the result to every active token through a TokenSink.
It does not subscribe to anything; the host calls it.

Overlapping refreshes of one entity are not serialized. The last write to
the tokens wins.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from lumenr.core.host.changes import (
    entity_change_requires_refresh,
    item_change_requires_refresh,
)
from lumenr.core.host.items import is_equipped
from lumenr.core.host.protocols import LightEntity, TokenSink
from lumenr.core.light.combiner import combine_profiles
from lumenr.core.light.models import LightProfile
from lumenr.core.parsers.descriptor import parse_item
from lumenr.core.utils.logging import get_logger
from lumenr.core.vocabulary.grammar import RUSSIAN_GRAMMAR, DescriptorGrammar

logger = logging.getLogger(__name__)


class EntityLightRefresher:
    """Recomputes effective light profiles and applies them to tokens.

    Example:
        refresher = EntityLightRefresher(sink=scene_sink)

        # Host hook: item equipped or description edited
        refresher.on_item_updated(item, diff, entity)

        # Startup: bring every owned entity up to date
        refresher.refresh_all(world.entities)
    """

    def __init__(self, sink: TokenSink, grammar: DescriptorGrammar = RUSSIAN_GRAMMAR):
        """Initialize the refresher.

        Args:
            sink: Collaborator that applies light data to tokens
            grammar: Label grammar used to parse item descriptions
        """
        self.sink = sink
        self.grammar = grammar

    def effective_profile(self, entity: LightEntity) -> LightProfile:
        """Combine the light of every equipped item, in item order."""
        profiles = []
        for item in entity.items:
            try:
                equipped = is_equipped(item)
            except Exception:
                logger.warning(
                    f"Cannot read equipped state of an item of {entity.name!r}", exc_info=True
                )
                continue
            if not equipped:
                continue
            profile = parse_item(item, self.grammar)
            if profile is not None:
                profiles.append(profile)

        return combine_profiles(profiles)

    def refresh(self, entity: LightEntity) -> LightProfile | None:
        """Recompute an entity's light and push it to its active tokens.

        Args:
            entity: Entity to refresh

        Returns:
            The applied profile, or None when the entity is not owned or has
            no active tokens (nothing is applied then)
        """
        if not entity.is_owner:
            return None

        entity_logger = get_logger(__name__, entity=entity.name)
        tokens = entity.active_tokens()
        if not tokens:
            entity_logger.debug(
                f"Entity {entity.name!r} has no active tokens; skipping light refresh"
            )
            return None

        profile = self.effective_profile(entity)
        light_data = profile.to_light_data()
        for token in tokens:
            try:
                self.sink.update_light(token, light_data)
            except Exception:
                entity_logger.error(
                    f"Failed to apply light to token of {entity.name!r}", exc_info=True
                )
                raise

        entity_logger.debug(
            f"Applied light to {len(tokens)} token(s) of {entity.name!r}: "
            f"dim={profile.dim} bright={profile.bright} color={profile.color}"
        )
        return profile

    def on_item_updated(
        self, item: Any, diff: Mapping[str, Any] | None, entity: LightEntity | None
    ) -> LightProfile | None:
        """Handle an item change notification.

        Args:
            item: The changed item
            diff: The host's change diff
            entity: Owner of the item, or None for unowned items

        Returns:
            The applied profile, or None if the change was irrelevant or
            the refresh failed (failures are logged, not raised)
        """
        if entity is None or not item_change_requires_refresh(diff):
            return None
        return self._refresh_logged(entity)

    def on_entity_updated(
        self, entity: LightEntity, changes: Mapping[str, Any] | None
    ) -> LightProfile | None:
        """Handle an entity change notification; failures are logged, not raised."""
        if not entity_change_requires_refresh(changes):
            return None
        return self._refresh_logged(entity)

    def _refresh_logged(self, entity: LightEntity) -> LightProfile | None:
        try:
            return self.refresh(entity)
        except Exception:
            logger.error(f"Light refresh failed for {entity.name!r}", exc_info=True)
            return None

    def refresh_all(self, entities: Iterable[LightEntity]) -> int:
        """Refresh every owned entity; one failure does not stop the rest.

        Returns:
            Number of entities whose light was applied
        """
        refreshed = 0
        for entity in entities:
            if not entity.is_owner:
                continue
            if self._refresh_logged(entity) is not None:
                refreshed += 1

        logger.info(f"Initial light refresh applied to {refreshed} entities")
        return refreshed


__all__ = [
    "EntityLightRefresher",
]
