"""
Hologram Manager

Registry of all holograms, persisted to holograms.yml in the plugin data folder.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from .config import DEFAULT_LINE_SPACING, HOLOGRAMS_FILE_NAME
from .hologram import Hologram
from .world import Location, WorldBackend

logger = logging.getLogger(__name__)


def _coordinate(hologram_id: str, record: dict, axis: str) -> float:
    """Read one coordinate of a stored record, 0.0 if missing or not a number"""
    value = record.get(axis)
    if value is None:
        return 0.0

    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning(f"Hologram '{hologram_id}' has invalid {axis} '{value}', using 0.0")
        return 0.0


class HologramManager:
    """Manages all holograms of one plugin instance"""

    def __init__(self, backend: WorldBackend, data_dir: Path,
                 line_spacing: float = DEFAULT_LINE_SPACING):
        """
        Args:
            backend: World backend used to resolve worlds and render holograms
            data_dir: Plugin data folder holding holograms.yml
            line_spacing: Vertical distance between hologram lines
        """
        self.backend = backend
        self.line_spacing = line_spacing
        self.holograms: Dict[str, Hologram] = {}
        self.holograms_file = Path(data_dir) / HOLOGRAMS_FILE_NAME

        # Records whose world wasn't loaded; kept on disk untouched
        self.unloaded: Dict[str, dict] = {}

        self.store = self.load_store()
        self.load_holograms()

    def load_store(self) -> dict:
        """Read holograms.yml, creating an empty one if it doesn't exist"""
        if not self.holograms_file.exists():
            try:
                self.holograms_file.parent.mkdir(parents=True, exist_ok=True)
                with open(self.holograms_file, 'w', encoding='utf-8') as f:
                    yaml.dump({'holograms': {}}, f, default_flow_style=False)
                logger.info(f"Created {self.holograms_file}")
            except OSError as e:
                logger.error(f"Could not create {HOLOGRAMS_FILE_NAME}: {e}")
                return {'holograms': {}}

        try:
            with open(self.holograms_file, 'r', encoding='utf-8') as f:
                store = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Could not load {HOLOGRAMS_FILE_NAME}: {e}")
            return {'holograms': {}}

        if not isinstance(store, dict) or not isinstance(store.get('holograms'), dict):
            logger.warning(f"{HOLOGRAMS_FILE_NAME} has no 'holograms' section, starting empty")
            return {'holograms': {}}

        # Ids like 123 load as ints
        store['holograms'] = {str(k): v for k, v in store['holograms'].items()}
        return store

    def load_holograms(self):
        """Create a hologram for every stored record whose world is loaded"""
        for hologram_id, record in self.store['holograms'].items():
            if not isinstance(record, dict):
                logger.warning(f"Ignoring malformed hologram record '{hologram_id}'")
                self.unloaded[hologram_id] = record
                continue

            world_name = record.get('world')

            # Skip if world doesn't exist or isn't loaded
            if not world_name or self.backend.resolve_world(world_name) is None:
                logger.warning(f"Skipping hologram '{hologram_id}' as world '{world_name}' is not loaded")
                self.unloaded[hologram_id] = record
                continue

            location = Location(
                world_name,
                _coordinate(hologram_id, record, 'x'),
                _coordinate(hologram_id, record, 'y'),
                _coordinate(hologram_id, record, 'z'),
            )

            lines = record.get('lines')
            if lines is None:
                lines = []
            elif not isinstance(lines, list):
                logger.warning(f"Hologram '{hologram_id}' has no list of lines, loading it empty")
                lines = []
            lines = [str(line) for line in lines]

            self.holograms[hologram_id] = Hologram(self.backend, hologram_id, location, lines, self.line_spacing)

        logger.info(f"Loaded {len(self.holograms)} hologram(s) from {self.holograms_file.name}")

    def create_hologram(self, hologram_id: str, location: Location, lines: List[str]) -> Optional[Hologram]:
        """
        Create a new hologram (not yet shown)

        Returns:
            The created hologram, or None if one with the ID already exists
        """
        if hologram_id in self.holograms:
            return None

        hologram = Hologram(self.backend, hologram_id, location, lines, self.line_spacing)
        self.holograms[hologram_id] = hologram
        self.unloaded.pop(hologram_id, None)
        self.save_hologram(hologram)

        logger.info(f"Created hologram '{hologram_id}' at {location.rounded()}")
        return hologram

    def get_hologram(self, hologram_id: str) -> Optional[Hologram]:
        return self.holograms.get(hologram_id)

    def remove_hologram(self, hologram_id: str) -> bool:
        """
        Remove a hologram from the world and from the store

        Returns:
            True if removed, False if not found
        """
        hologram = self.holograms.pop(hologram_id, None)
        if hologram is None:
            return False

        hologram.remove()
        self.store['holograms'].pop(hologram_id, None)
        self.save_store()

        logger.info(f"Removed hologram '{hologram_id}'")
        return True

    def get_all_holograms(self) -> Dict[str, Hologram]:
        return dict(self.holograms)

    def show_all_holograms(self):
        """Show every hologram; one failure doesn't stop the rest"""
        for hologram in list(self.holograms.values()):
            try:
                hologram.show()
            except Exception as e:
                logger.error(f"Failed to show hologram '{hologram.id}': {e}")

    def remove_all_holograms(self):
        """Remove every hologram from the world (they stay registered)"""
        for hologram in list(self.holograms.values()):
            try:
                hologram.remove()
            except Exception as e:
                logger.error(f"Failed to remove hologram '{hologram.id}': {e}")

    def set_line_spacing(self, line_spacing: float):
        """Apply a new line spacing, re-rendering visible holograms"""
        self.line_spacing = line_spacing
        for hologram in self.holograms.values():
            if hologram.line_spacing != line_spacing:
                hologram.line_spacing = line_spacing
                if hologram.visible:
                    hologram.remove()
                    hologram.show()

    def save_hologram(self, hologram: Hologram) -> bool:
        """Write one hologram's record and save the store"""
        self.store['holograms'][hologram.id] = self._record(hologram)
        return self.save_store()

    def save_all_holograms(self) -> bool:
        """Rewrite the whole store from the holograms in memory"""
        # Clear the current section, keeping records of unloaded worlds
        self.store['holograms'] = dict(self.unloaded)

        for hologram in self.holograms.values():
            self.store['holograms'][hologram.id] = self._record(hologram)

        return self.save_store()

    def save_store(self) -> bool:
        """
        Save holograms.yml to disk

        Returns:
            True if saved; on failure the error is logged and memory is kept as is
        """
        try:
            with open(self.holograms_file, 'w', encoding='utf-8') as f:
                yaml.dump(self.store, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
            return True
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Could not save {HOLOGRAMS_FILE_NAME}: {e}")
            return False

    @staticmethod
    def _record(hologram: Hologram) -> dict:
        location = hologram.location
        return {
            'world': location.world,
            'x': float(location.x),
            'y': float(location.y),
            'z': float(location.z),
            'lines': hologram.lines,
        }
