"""
World Interfaces

Location type and the host-server collaborators used by holograms,
welcome messages and the tab list.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Optional, Sequence


@dataclass(frozen=True)
class Location:
    """A point in a named world"""

    world: str
    x: float
    y: float
    z: float

    def below(self, distance: float) -> "Location":
        return replace(self, y=self.y - distance)

    def rounded(self) -> str:
        """Short "world, x, y, z" form used in chat output"""
        return f"{self.world}, {round(self.x)}, {round(self.y)}, {round(self.z)}"

    @classmethod
    def parse(cls, value: str) -> "Location":
        """
        Parse "world,x,y,z"

        Raises:
            ValueError: on a malformed value
        """
        parts = [part.strip() for part in value.split(',')]
        if len(parts) != 4 or not parts[0]:
            raise ValueError(f"Expected world,x,y,z but got '{value}'")
        return cls(parts[0], float(parts[1]), float(parts[2]), float(parts[3]))


class WorldBackend(ABC):
    """Entity operations provided by the host server"""

    @abstractmethod
    def resolve_world(self, name: str) -> Optional[Any]:
        """Return a handle for a loaded world, or None if it isn't loaded"""

    @abstractmethod
    def spawn_marker(self, world: Any, x: float, y: float, z: float, label: str) -> Any:
        """
        Spawn an invisible, invulnerable, non-collidable marker entity
        showing label as its name, and return its handle
        """

    @abstractmethod
    def tag_entity(self, entity: Any, hologram_id: str) -> None:
        """Mark an entity as belonging to a hologram"""

    @abstractmethod
    def despawn_entity(self, entity: Any) -> None:
        ...

    @abstractmethod
    def is_live(self, entity: Any) -> bool:
        ...

    @abstractmethod
    def hologram_id_of(self, entity: Any) -> Optional[str]:
        """Hologram id an entity was tagged with, or None"""


class SessionBackend(ABC):
    """Connected-player operations provided by the host server"""

    @abstractmethod
    def online_players(self) -> Sequence[Any]:
        ...

    @abstractmethod
    def set_header_footer(self, player: Any, header: str, footer: str) -> None:
        ...

    @abstractmethod
    def broadcast(self, message: str) -> None:
        ...
