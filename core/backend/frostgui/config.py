"""
Configuration for FrostGUI

Defines default plugin settings, file names and rendering constants.
"""

from pathlib import Path

# Data folder used when no explicit --data-dir is given
DATA_DIR = Path.home() / ".config" / "frostgui"
CONFIG_FILE_NAME = "config.yml"
HOLOGRAMS_FILE_NAME = "holograms.yml"

# Server tick rate (ticks per second)
TICKS_PER_SECOND = 20

# Vertical distance between hologram lines, in blocks
DEFAULT_LINE_SPACING = 0.25

# Tag shared by every hologram marker entity
HOLOGRAM_TAG = "frostgui_hologram"

# Permission nodes
PERMISSION_ADMIN = "frostgui.admin"
PERMISSION_HOLOGRAM = "frostgui.hologram"

SUPPORT_MESSAGE = "&b&l[FrostGUI Support] &aJoin Frostline's discord for plugin support! &b&nhttps://discord.gg/FGUEEj6k7k"

# Default plugin configuration (config.yml)
DEFAULT_CONFIG = {
    "settings": {
        "enable-welcome-messages": True,
    },
    "welcome": {
        "broadcast-join": True,
        "join-message": "&a{player_name} &fhas joined the server!",
        "first-join": {
            "enabled": True,
            "broadcast": True,
            "message": "&d&lWelcome &b{player_name} &d&lto the server for the first time!",
        },
        "chat-welcome": {
            "enabled": True,
            "message": "&bWelcome back, &f{player_name}&b! Type &f/discord &bto join our community.",
            "colorful": True,
        },
    },
    "tab-list": {
        "enabled": True,
        "update-interval": 30,
        "header": "&b&lFrostCraft Development Server",
        "footer": "&7Have a great time on our server!",
    },
    "holograms": {
        "enabled": True,
        "line-spacing": DEFAULT_LINE_SPACING,
    },
    "messages": {
        "prefix": "&8[&bFrostGUI&8] &r",
        "no-permission": "&cYou don't have permission to do that.",
    },
    "discord": {
        "enabled": True,
        "link": "https://discord.gg/yourserver",
        "message": "&a&lJoin our Discord server: &b{link}",
    },
    # Pterodactyl panel connection used by the console CLI
    "panel": {},
}

# Minecraft dimension ids for the default Bukkit world names
DEFAULT_WORLD_DIMENSIONS = {
    "world": "minecraft:overworld",
    "world_nether": "minecraft:the_nether",
    "world_the_end": "minecraft:the_end",
}
