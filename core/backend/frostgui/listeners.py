"""
Hologram Listener

Stops players and mobs from interacting with, manipulating or damaging
hologram marker entities.
"""

import logging
from typing import Any

from .world import WorldBackend

logger = logging.getLogger(__name__)


class HologramListener:
    """
    Event handlers for hologram entity protection

    Events are host objects exposing the target entity (``entity``) and
    ``cancel()``.
    """

    def __init__(self, backend: WorldBackend):
        self.backend = backend

    def is_hologram_entity(self, entity: Any) -> bool:
        return self.backend.hologram_id_of(entity) is not None

    def _protect(self, event: Any) -> bool:
        if self.is_hologram_entity(event.entity):
            event.cancel()
            return True
        return False

    def on_armor_stand_manipulate(self, event: Any) -> bool:
        return self._protect(event)

    def on_player_interact_entity(self, event: Any) -> bool:
        return self._protect(event)

    def on_entity_damage(self, event: Any) -> bool:
        if self._protect(event):
            logger.debug(f"Blocked damage to hologram entity of '{self.backend.hologram_id_of(event.entity)}'")
            return True
        return False
