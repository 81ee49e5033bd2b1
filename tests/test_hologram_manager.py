import yaml

from frostgui.hologram_manager import HologramManager
from frostgui.world import Location

from conftest import FakeWorld


def read_store(data_dir):
    with open(data_dir / "holograms.yml", encoding="utf-8") as f:
        return yaml.safe_load(f)


def write_store(data_dir, holograms):
    with open(data_dir / "holograms.yml", "w", encoding="utf-8") as f:
        yaml.safe_dump({"holograms": holograms}, f)


def test_creates_empty_store_file(manager, data_dir):
    assert read_store(data_dir) == {"holograms": {}}
    assert manager.get_all_holograms() == {}


def test_create_then_get(manager, spawn):
    created = manager.create_hologram("welcome", spawn, ["Hello", "World"])

    hologram = manager.get_hologram("welcome")
    assert hologram is created
    assert hologram.lines == ["Hello", "World"]
    assert hologram.location == spawn


def test_create_does_not_render(manager, world, spawn):
    hologram = manager.create_hologram("welcome", spawn, ["Hello"])

    assert hologram.visible is False
    assert world.entities == []


def test_create_persists_immediately(manager, data_dir, spawn):
    manager.create_hologram("welcome", spawn, ["Hello", "World"])

    assert read_store(data_dir)["holograms"]["welcome"] == {
        "world": "spawn", "x": 0.0, "y": 64.0, "z": 0.0, "lines": ["Hello", "World"],
    }


def test_create_duplicate_is_rejected(manager, data_dir, spawn):
    original = manager.create_hologram("welcome", spawn, ["Hello"])
    before = read_store(data_dir)

    assert manager.create_hologram("welcome", Location("world", 1, 2, 3), ["Other"]) is None
    assert manager.get_hologram("welcome") is original
    assert original.lines == ["Hello"]
    assert read_store(data_dir) == before


def test_get_unknown_returns_none(manager):
    assert manager.get_hologram("missing") is None


def test_remove_hologram(manager, world, data_dir, spawn):
    manager.create_hologram("welcome", spawn, ["Hello"]).show()

    assert manager.remove_hologram("welcome") is True
    assert manager.get_hologram("welcome") is None
    assert world.alive() == []
    assert read_store(data_dir) == {"holograms": {}}


def test_remove_unknown_returns_false(manager, data_dir, spawn):
    manager.create_hologram("welcome", spawn, ["Hello"])
    before = read_store(data_dir)

    assert manager.remove_hologram("missing") is False
    assert read_store(data_dir) == before


def test_get_all_holograms_is_a_snapshot(manager, spawn):
    manager.create_hologram("welcome", spawn, ["Hello"])

    snapshot = manager.get_all_holograms()
    snapshot.clear()

    assert "welcome" in manager.get_all_holograms()


def test_show_all_and_remove_all(manager, world, spawn):
    manager.create_hologram("a", spawn, ["1", "2"])
    manager.create_hologram("b", spawn, ["3"])

    manager.show_all_holograms()
    assert len(world.alive()) == 3

    manager.remove_all_holograms()
    assert world.alive() == []
    assert set(manager.get_all_holograms()) == {"a", "b"}


def test_show_all_continues_after_a_failure(manager, world, spawn, monkeypatch):
    broken = manager.create_hologram("broken", spawn, ["x"])
    manager.create_hologram("fine", spawn, ["y"])

    def explode():
        raise RuntimeError("spawn failed")

    monkeypatch.setattr(broken, "show", explode)
    manager.show_all_holograms()

    assert [m.label for m in world.alive()] == ["y"]


def test_save_all_then_reload_round_trip(manager, data_dir, spawn):
    manager.create_hologram("welcome", spawn, ["Hello", "World"])
    manager.create_hologram("rules", Location("world", 1.5, 70.0, -3.25), ["&cRules", "No griefing"])
    manager.get_hologram("welcome").add_line("Extra")
    manager.save_all_holograms()

    reloaded = HologramManager(FakeWorld(), data_dir)

    assert {
        hologram_id: (h.location, h.lines) for hologram_id, h in reloaded.get_all_holograms().items()
    } == {
        "welcome": (spawn, ["Hello", "World", "Extra"]),
        "rules": (Location("world", 1.5, 70.0, -3.25), ["&cRules", "No griefing"]),
    }
    assert all(not h.visible for h in reloaded.get_all_holograms().values())


def test_load_skips_unloaded_world_and_keeps_record(data_dir):
    record = {"world": "nether", "x": 1.0, "y": 2.0, "z": 3.0, "lines": ["hot"]}
    write_store(data_dir, {
        "far": record,
        "near": {"world": "spawn", "x": 0.0, "y": 64.0, "z": 0.0, "lines": ["hi"]},
    })

    manager = HologramManager(FakeWorld(), data_dir)

    assert manager.get_hologram("far") is None
    assert manager.get_hologram("near") is not None
    assert read_store(data_dir)["holograms"]["far"] == record

    manager.save_all_holograms()
    assert read_store(data_dir)["holograms"]["far"] == record


def test_load_numeric_ids_as_strings(data_dir):
    write_store(data_dir, {123: {"world": "spawn", "x": 0, "y": 0, "z": 0, "lines": ["n"]}})

    manager = HologramManager(FakeWorld(), data_dir)

    assert manager.get_hologram("123") is not None
    assert manager.remove_hologram("123") is True
    assert read_store(data_dir) == {"holograms": {}}


def test_load_defaults_bad_coordinates_to_zero(data_dir):
    write_store(data_dir, {
        "a": {"world": "spawn", "x": None, "y": "high", "z": 5, "lines": ["a"]},
        "b": {"world": "spawn", "x": 1.0, "y": 64.0, "z": 2.0, "lines": ["b"]},
    })

    manager = HologramManager(FakeWorld(), data_dir)

    assert manager.get_hologram("a").location == Location("spawn", 0.0, 0.0, 5.0)
    assert manager.get_hologram("b").location == Location("spawn", 1.0, 64.0, 2.0)


def test_load_ignores_lines_that_are_not_a_list(data_dir):
    write_store(data_dir, {"a": {"world": "spawn", "x": 0, "y": 0, "z": 0, "lines": "hello"}})

    manager = HologramManager(FakeWorld(), data_dir)

    assert manager.get_hologram("a").lines == []


def test_malformed_record_survives_save_all(data_dir):
    write_store(data_dir, {
        "broken": "not a record",
        "ok": {"world": "spawn", "x": 0.0, "y": 0.0, "z": 0.0, "lines": ["ok"]},
    })

    manager = HologramManager(FakeWorld(), data_dir)
    manager.save_all_holograms()

    assert manager.get_hologram("broken") is None
    assert read_store(data_dir)["holograms"]["broken"] == "not a record"


def test_load_tolerates_garbage_file(data_dir):
    (data_dir / "holograms.yml").write_text("- just\n- a list\n", encoding="utf-8")

    manager = HologramManager(FakeWorld(), data_dir)

    assert manager.get_all_holograms() == {}


def test_save_failure_keeps_memory_state(manager, data_dir, spawn, caplog):
    manager.holograms_file = data_dir / "missing-dir" / "holograms.yml"

    hologram = manager.create_hologram("welcome", spawn, ["Hello"])

    assert hologram is not None
    assert manager.get_hologram("welcome") is hologram
    assert manager.save_all_holograms() is False
    assert "Could not save holograms.yml" in caplog.text


def test_set_line_spacing_rerenders_visible(manager, world, spawn):
    manager.create_hologram("welcome", spawn, ["a", "b"]).show()

    manager.set_line_spacing(0.5)

    assert [m.y for m in world.alive()] == [64.0, 63.5]
