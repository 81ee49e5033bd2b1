"""
FrostGUI Plugin

Plugin lifecycle: wires configuration, welcome messages, the tab list task,
holograms and commands to the host server's backends.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from . import __version__
from .colors import AQUA, GRAY, translate_color_codes
from .commands import HologramCommand
from .config import CONFIG_FILE_NAME, DEFAULT_LINE_SPACING, PERMISSION_ADMIN, SUPPORT_MESSAGE
from .config_loader import get_option, load_config, save_default_config, validate_config
from .hologram_manager import HologramManager
from .listeners import HologramListener
from .scheduler import TaskScheduler
from .tablist import TabListUpdater
from .welcome import WelcomeMessages
from .world import SessionBackend, WorldBackend

logger = logging.getLogger(__name__)


class FrostGUI:
    """Main plugin object; the host calls on_enable/on_disable and forwards events"""

    def __init__(self, data_dir: Path, world: WorldBackend, sessions: SessionBackend,
                 scheduler: Optional[TaskScheduler] = None):
        self.data_dir = Path(data_dir)
        self.world = world
        self.sessions = sessions
        self.scheduler = scheduler or TaskScheduler()

        self.config: Dict = {}
        self.welcome: Optional[WelcomeMessages] = None
        self.tab_list: Optional[TabListUpdater] = None
        self.hologram_manager: Optional[HologramManager] = None
        self.hologram_command: Optional[HologramCommand] = None
        self.hologram_listener: Optional[HologramListener] = None

    @property
    def config_path(self) -> Path:
        return self.data_dir / CONFIG_FILE_NAME

    def load_config(self) -> Dict:
        """Load config.yml from the data folder, writing the defaults first if needed"""
        save_default_config(self.data_dir)
        config = load_config(self.config_path)

        is_valid, errors = validate_config(config)
        if not is_valid:
            logger.error("✗ Configuration validation failed:")
            for error in errors:
                logger.error(f"  - {error}")

        return config

    def line_spacing(self) -> float:
        return float(get_option(self.config, 'holograms.line-spacing', DEFAULT_LINE_SPACING))

    def on_enable(self):
        logger.info("FrostGUI has been enabled!")

        self.config = self.load_config()

        if get_option(self.config, 'settings.enable-welcome-messages', False):
            self.welcome = WelcomeMessages(self.config, self.sessions)
            logger.info("Welcome messages have been enabled!")

        self.tab_list = TabListUpdater(self.config, self.sessions, self.scheduler)
        if self.tab_list.enabled:
            self.tab_list.start()
            logger.info("Tab list customization has been enabled!")

        self.hologram_manager = HologramManager(self.world, self.data_dir, self.line_spacing())
        self.hologram_command = HologramCommand(self.hologram_manager, self.config)
        self.hologram_listener = HologramListener(self.world)

        if get_option(self.config, 'holograms.enabled', True):
            self.hologram_manager.show_all_holograms()
            logger.info("Holograms have been enabled and loaded!")

    def on_disable(self):
        logger.info("FrostGUI has been disabled!")

        if self.tab_list is not None:
            self.tab_list.stop()

        # Remove all holograms from the world
        if self.hologram_manager is not None:
            self.hologram_manager.remove_all_holograms()
            self.hologram_manager.save_all_holograms()
            self.hologram_manager.holograms.clear()
            logger.info("All holograms have been saved and removed!")

    def reload_config(self):
        """Re-read config.yml and hand it to every component"""
        self.config = self.load_config()

        if get_option(self.config, 'settings.enable-welcome-messages', False):
            self.welcome = WelcomeMessages(self.config, self.sessions)
        else:
            self.welcome = None

        if self.tab_list is not None:
            self.tab_list.config = self.config
            if self.tab_list.enabled:
                self.tab_list.start()
            else:
                self.tab_list.stop()

        if self.hologram_command is not None:
            self.hologram_command.config = self.config
        if self.hologram_manager is not None:
            self.hologram_manager.set_line_spacing(self.line_spacing())

        logger.info("Configuration reloaded")

    def on_player_join(self, event: Any):
        """
        Handle a player join event

        The event exposes ``player`` and a writable ``join_message``.
        """
        player = event.player

        if self.welcome is not None:
            event.join_message = self.welcome.on_player_join(player)

        if self.tab_list is not None:
            self.tab_list.apply(player)

    def _prefixed(self, message: str) -> str:
        return translate_color_codes(get_option(self.config, 'messages.prefix', '') + message)

    def on_command(self, sender: Any, name: str, args: List[str]) -> bool:
        """
        Dispatch a command

        Returns:
            True if the command belongs to this plugin
        """
        name = name.lower()

        if name == "hologram":
            return self.hologram_command.on_command(sender, args)

        if name == "frostgui":
            if args and args[0].lower() == "reload":
                if sender.has_permission(PERMISSION_ADMIN):
                    self.reload_config()
                    sender.send_message(self._prefixed("Configuration reloaded!"))
                else:
                    sender.send_message(translate_color_codes(get_option(self.config, 'messages.no-permission', '')))
                return True

            # Plugin info
            sender.send_message(AQUA + "⚡ FrostGUI " + GRAY + "v" + __version__)
            sender.send_message(GRAY + "A customizable welcome message plugin")
            if sender.has_permission(PERMISSION_ADMIN):
                sender.send_message(GRAY + "Use /frostgui reload to reload the configuration")
            return True

        if name == "discord":
            if not get_option(self.config, 'discord.enabled', True):
                sender.send_message(self._prefixed("&cThe Discord feature is currently disabled."))
                return True

            link = get_option(self.config, 'discord.link', "https://discord.gg/yourserver")
            message = get_option(self.config, 'discord.message', "&a&lJoin our Discord server: &b{link}")
            sender.send_message(self._prefixed(message.replace('{link}', link)))
            return True

        if name == "support":
            if sender.has_permission(PERMISSION_ADMIN):
                sender.send_message(translate_color_codes(SUPPORT_MESSAGE))
            else:
                sender.send_message(self._prefixed(get_option(self.config, 'messages.no-permission', '')))
            return True

        return False

    def on_tab_complete(self, sender: Any, name: str, args: List[str]) -> List[str]:
        if name.lower() == "hologram" and self.hologram_command is not None:
            return self.hologram_command.on_tab_complete(sender, args)
        return []
