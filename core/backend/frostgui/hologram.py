"""
Hologram

A named, positioned, multi-line floating text display made of marker entities.
"""

import logging
from typing import Any, List

from .colors import translate_color_codes
from .config import DEFAULT_LINE_SPACING
from .world import Location, WorldBackend

logger = logging.getLogger(__name__)


class Hologram:
    """A hologram with multiple text lines"""

    def __init__(self, backend: WorldBackend, hologram_id: str, location: Location,
                 lines: List[str], line_spacing: float = DEFAULT_LINE_SPACING):
        """
        Args:
            backend: World backend used to spawn and remove entities
            hologram_id: Unique identifier for the hologram
            location: Location of the top line
            lines: Lines of text to display (supports color codes with &)
            line_spacing: Vertical distance between lines
        """
        self.backend = backend
        self._id = hologram_id
        self._location = location
        self._lines = list(lines)
        self._entities: List[Any] = []
        self._visible = False
        self.line_spacing = line_spacing

    @property
    def id(self) -> str:
        return self._id

    @property
    def location(self) -> Location:
        return self._location

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    @property
    def entities(self) -> List[Any]:
        return list(self._entities)

    @property
    def visible(self) -> bool:
        return self._visible

    def show(self):
        """Create the hologram entities in the world"""
        if self._visible:
            return

        # Remove any existing entities
        self.remove()

        world = self.backend.resolve_world(self._location.world)
        if world is None:
            logger.warning(f"Cannot show hologram '{self._id}': world '{self._location.world}' is not loaded")
            return

        # One marker per line, top line first
        for index, line in enumerate(self._lines):
            position = self._location.below(index * self.line_spacing)
            entity = self.backend.spawn_marker(world, position.x, position.y, position.z,
                                               translate_color_codes(line))
            self.backend.tag_entity(entity, self._id)
            self._entities.append(entity)

        self._visible = True

    def remove(self):
        """Remove all hologram entities from the world"""
        for entity in self._entities:
            if self.backend.is_live(entity):
                self.backend.despawn_entity(entity)
        self._entities.clear()
        self._visible = False

    def update_lines(self, new_lines: List[str]):
        """Replace every line of the hologram"""
        self._lines = list(new_lines)
        self._refresh()

    def update_location(self, new_location: Location):
        self._location = new_location
        self._refresh()

    def add_line(self, line: str):
        """Append a line to the bottom of the hologram"""
        self._lines.append(line)
        self._refresh()

    def remove_line(self, index: int) -> bool:
        """
        Remove a line

        Args:
            index: Zero-based index of the line to remove

        Returns:
            True if removed, False if index is out of bounds
        """
        if not 0 <= index < len(self._lines):
            return False
        del self._lines[index]
        self._refresh()
        return True

    def set_line(self, index: int, line: str) -> bool:
        """
        Replace the text of a single line

        Returns:
            True if replaced, False if index is out of bounds
        """
        if not 0 <= index < len(self._lines):
            return False
        self._lines[index] = line
        self._refresh()
        return True

    def _refresh(self):
        # Full derender + render; a visible hologram is never updated in place
        if self._visible:
            self.remove()
            self.show()

    def __repr__(self) -> str:
        return f"Hologram(id={self._id!r}, location={self._location!r}, lines={len(self._lines)}, visible={self._visible})"
