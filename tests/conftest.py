"""
Pytest configuration and shared fixtures: in-memory server backends.
"""
import itertools

import pytest

from frostgui.hologram_manager import HologramManager
from frostgui.world import Location, SessionBackend, WorldBackend


class FakeEntity:
    def __init__(self, entity_id, world, x, y, z, label):
        self.entity_id = entity_id
        self.world = world
        self.x = x
        self.y = y
        self.z = z
        self.label = label
        self.tag = None
        self.dead = False


class FakeWorld(WorldBackend):
    """Records spawned marker entities in memory"""

    def __init__(self, worlds=("spawn", "world")):
        self.worlds = set(worlds)
        self.entities = []
        self._ids = itertools.count(1)

    def resolve_world(self, name):
        return name if name in self.worlds else None

    def spawn_marker(self, world, x, y, z, label):
        entity = FakeEntity(next(self._ids), world, x, y, z, label)
        self.entities.append(entity)
        return entity

    def tag_entity(self, entity, hologram_id):
        entity.tag = hologram_id

    def despawn_entity(self, entity):
        entity.dead = True

    def is_live(self, entity):
        return not entity.dead

    def hologram_id_of(self, entity):
        return entity.tag

    def alive(self, hologram_id=None):
        return [e for e in self.entities
                if not e.dead and (hologram_id is None or e.tag == hologram_id)]


class FakePlayer:
    is_player = True

    def __init__(self, name="Steve", location=None, permissions=("frostgui.hologram",), played_before=True):
        self.name = name
        self.location = location or Location("spawn", 0.0, 64.0, 0.0)
        self.permissions = set(permissions)
        self.has_played_before = played_before
        self.messages = []
        self.header = None
        self.footer = None

    def send_message(self, message):
        self.messages.append(message)

    def has_permission(self, permission):
        return permission in self.permissions

    def teleport(self, location):
        self.location = location


class FakeConsole:
    is_player = False
    name = "CONSOLE"

    def __init__(self):
        self.messages = []

    def send_message(self, message):
        self.messages.append(message)

    def has_permission(self, permission):
        return True


class FakeSessions(SessionBackend):
    def __init__(self, players=()):
        self.players = list(players)
        self.broadcasts = []

    def online_players(self):
        return list(self.players)

    def set_header_footer(self, player, header, footer):
        player.header = header
        player.footer = footer

    def broadcast(self, message):
        self.broadcasts.append(message)


class FakeEvent:
    def __init__(self, entity=None, player=None):
        self.entity = entity
        self.player = player
        self.cancelled = False
        self.join_message = "default join message"

    def cancel(self):
        self.cancelled = True


@pytest.fixture
def world():
    return FakeWorld()


@pytest.fixture
def sessions():
    return FakeSessions()


@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / "FrostGUI"
    path.mkdir()
    return path


@pytest.fixture
def manager(world, data_dir):
    return HologramManager(world, data_dir)


@pytest.fixture
def spawn():
    return Location("spawn", 0.0, 64.0, 0.0)
