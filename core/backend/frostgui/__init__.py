"""
FrostGUI

Join messages, tab list header/footer and floating text holograms
for Minecraft servers.

Version: 1.0.0
"""

__version__ = "1.0.0"
__description__ = "Welcome messages, tab list and holograms for Minecraft servers"

from .hologram import Hologram
from .hologram_manager import HologramManager
from .plugin import FrostGUI
from .world import Location, SessionBackend, WorldBackend

__all__ = [
    "FrostGUI",
    "Hologram",
    "HologramManager",
    "Location",
    "SessionBackend",
    "WorldBackend",
]
