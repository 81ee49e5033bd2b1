"""
Pterodactyl Backend

Renders holograms on a panel-hosted server by sending console commands
through the Pterodactyl client API.
"""

import json
import logging
import re
import uuid
from typing import Any, Dict, Optional

import requests

from .colors import strip_color
from .config import DEFAULT_WORLD_DIMENSIONS, HOLOGRAM_TAG
from .world import Location, WorldBackend

logger = logging.getLogger(__name__)

# Characters allowed in scoreboard tags
_TAG_UNSAFE = re.compile(r'[^A-Za-z0-9_.+-]')


class PanelClient:
    """Client for the Pterodactyl client API of a single server"""

    def __init__(self, panel_url: str, api_key: str, server: str):
        """
        Initialize Pterodactyl API client

        Args:
            panel_url: Base URL of Pterodactyl panel (e.g., https://panel.example.com)
            api_key: Client API key (ptlc_ prefix)
            server: Server identifier (short id or UUID)
        """
        self.panel_url = panel_url.rstrip('/')
        self.server = server

        if not api_key.startswith('ptlc_'):
            logger.warning("API key doesn't start with ptlc_ - console commands need a client key")

        self.session = requests.Session()
        self.session.headers.update({
            'Authorization': f'Bearer {api_key}',
            'Accept': 'application/json',
            'Content-Type': 'application/json'
        })

    def send_command(self, command: str):
        """
        Run a command on the server console

        Raises:
            requests.RequestException: if the panel rejects the request
        """
        url = f"{self.panel_url}/api/client/servers/{self.server}/command"

        try:
            response = self.session.post(url, json={'command': command}, timeout=10)
            response.raise_for_status()
            logger.debug(f"Console: {command}")
        except requests.RequestException as e:
            logger.error(f"Console command failed: {e}")
            raise


def tag_for(hologram_id: str) -> str:
    """Scoreboard tag carried by every entity of a hologram"""
    return f"frostgui.{_TAG_UNSAFE.sub('_', hologram_id)}"


def snbt_string(value: str) -> str:
    """Quote value as a single-quoted SNBT string"""
    return "'" + value.replace('\\', '\\\\').replace("'", "\\'") + "'"


class PanelWorld(WorldBackend):
    """
    WorldBackend over console commands

    Entity handles are generated line tags; liveness is tracked locally, so
    entities left over from an earlier process are cleaned up with purge().
    """

    def __init__(self, client: PanelClient, worlds: Optional[Dict[str, str]] = None):
        """
        Args:
            client: Panel client for the target server
            worlds: World name -> dimension id (defaults to the vanilla three)
        """
        self.client = client
        self.worlds = dict(worlds or DEFAULT_WORLD_DIMENSIONS)
        self.live: Dict[str, Optional[str]] = {}

    @classmethod
    def from_config(cls, panel_config: Dict) -> "PanelWorld":
        client = PanelClient(panel_config['panel_url'], panel_config['api_key'], panel_config['server'])
        return cls(client, panel_config.get('worlds'))

    def resolve_world(self, name: str) -> Optional[str]:
        return self.worlds.get(name)

    def spawn_marker(self, world: Any, x: float, y: float, z: float, label: str) -> str:
        handle = f"frostgui.line.{uuid.uuid4().hex[:12]}"

        nbt = (
            "{Invisible:1b,Marker:1b,Small:1b,NoGravity:1b,Invulnerable:1b,"
            "CustomNameVisible:1b,"
            f"CustomName:{snbt_string(json.dumps({'text': label}, ensure_ascii=False))},"
            f"Tags:[\"{HOLOGRAM_TAG}\",\"{handle}\"]}}"
        )
        self.client.send_command(f"execute in {world} run summon minecraft:armor_stand {x} {y} {z} {nbt}")

        self.live[handle] = None
        return handle

    def tag_entity(self, entity: str, hologram_id: str):
        self.client.send_command(f"tag @e[tag={entity},limit=1] add {tag_for(hologram_id)}")
        self.live[entity] = hologram_id

    def despawn_entity(self, entity: str):
        self.client.send_command(f"kill @e[tag={entity}]")
        self.live.pop(entity, None)

    def is_live(self, entity: str) -> bool:
        return entity in self.live

    def hologram_id_of(self, entity: str) -> Optional[str]:
        return self.live.get(entity)

    def purge(self, hologram_id: Optional[str] = None):
        """Kill tagged hologram entities, all of them or those of one hologram"""
        tag = tag_for(hologram_id) if hologram_id else HOLOGRAM_TAG
        self.client.send_command(f"kill @e[type=minecraft:armor_stand,tag={tag}]")

        for entity, owner in list(self.live.items()):
            if hologram_id is None or owner == hologram_id:
                del self.live[entity]


class PanelPlayer:
    """
    An in-game player driven from the console

    Messages go to the log; teleports are console /tp commands.
    """

    is_player = True
    has_played_before = True

    def __init__(self, world: PanelWorld, name: str, location: Optional[Location] = None):
        self.world = world
        self.name = name
        self.location = location
        self.messages: list[str] = []

    def send_message(self, message: str):
        self.messages.append(message)
        logger.info(strip_color(message))

    def has_permission(self, permission: str) -> bool:
        # Holders of the panel API key administer the server
        return True

    def teleport(self, location: Location):
        dimension = self.world.resolve_world(location.world) or location.world
        self.world.client.send_command(
            f"execute in {dimension} run tp {self.name} {location.x} {location.y} {location.z}")
        self.location = location
