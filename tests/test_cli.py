from unittest.mock import patch

import yaml

from frostgui import cli


def write_config(data_dir, config):
    with open(data_dir / "config.yml", "w", encoding="utf-8") as f:
        yaml.safe_dump(config, f)


PANEL = {
    "panel_url": "https://panel.example.com",
    "api_key": "ptlc_key",
    "server": "abcd1234",
    "worlds": {"world": "minecraft:overworld"},
}


def test_requires_panel_config(data_dir):
    assert cli.main(["--data-dir", str(data_dir), "list"]) == 1


def test_rejects_bad_location(data_dir):
    write_config(data_dir, {"panel": PANEL})

    assert cli.main(["--data-dir", str(data_dir), "--at", "world,1", "list"]) == 1


def test_create_renders_through_panel(data_dir):
    write_config(data_dir, {"panel": PANEL})

    with patch("frostgui.pterodactyl.requests.Session") as session_cls:
        post = session_cls.return_value.post
        code = cli.main([
            "--data-dir", str(data_dir), "--at", "world,0,64,0",
            "create", "welcome", "&bWelcome", "home",
        ])

    assert code == 0
    commands = [call.kwargs["json"]["command"] for call in post.call_args_list]
    assert commands[0] == "kill @e[type=minecraft:armor_stand,tag=frostgui_hologram]"
    assert commands[1].startswith("execute in minecraft:overworld run summon minecraft:armor_stand 0.0 64.0 0.0")
    assert commands[2].endswith(" add frostgui.welcome")
    assert len(commands) == 3

    with open(data_dir / "holograms.yml", encoding="utf-8") as f:
        assert yaml.safe_load(f)["holograms"]["welcome"] == {
            "world": "world", "x": 0.0, "y": 64.0, "z": 0.0, "lines": ["&bWelcome home"],
        }


def test_panel_failure_returns_error(data_dir):
    import requests

    write_config(data_dir, {"panel": PANEL})

    with patch("frostgui.pterodactyl.requests.Session") as session_cls:
        session_cls.return_value.post.side_effect = requests.ConnectionError("refused")
        assert cli.main(["--data-dir", str(data_dir), "list"]) == 1
