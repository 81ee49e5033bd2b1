"""
Hologram Command

Handler and tab completion for /hologram. Line numbers are 1-based here and
converted to the 0-based indices used by Hologram.
"""

import logging
from typing import Any, Dict, List, Optional

from .colors import AQUA, GRAY, GREEN, RED, WHITE, YELLOW, translate_color_codes
from .config import PERMISSION_HOLOGRAM
from .config_loader import get_option
from .hologram import Hologram
from .hologram_manager import HologramManager

logger = logging.getLogger(__name__)

SUBCOMMANDS = ["create", "remove", "list", "tp", "teleport", "addline", "removeline", "move", "edit", "info"]
ID_SUBCOMMANDS = {"remove", "tp", "teleport", "addline", "removeline", "move", "edit", "info"}


class HologramCommand:
    """
    /hologram <subcommand> [args...]

    Senders expose ``name``, ``send_message()``, ``has_permission()`` and
    ``is_player``; players also expose ``location`` and ``teleport()``.
    """

    def __init__(self, manager: HologramManager, config: Dict):
        self.manager = manager
        self.config = config

    def on_command(self, sender: Any, args: List[str]) -> bool:
        if not getattr(sender, 'is_player', False):
            sender.send_message(RED + "This command can only be used by players.")
            return True

        # Check permission
        if not sender.has_permission(PERMISSION_HOLOGRAM):
            sender.send_message(translate_color_codes(
                get_option(self.config, 'messages.prefix', '') +
                get_option(self.config, 'messages.no-permission', '')))
            return True

        if not args:
            self.show_help(sender)
            return True

        handlers = {
            "create": self.handle_create,
            "remove": self.handle_remove,
            "list": self.handle_list,
            "teleport": self.handle_teleport,
            "tp": self.handle_teleport,
            "addline": self.handle_add_line,
            "removeline": self.handle_remove_line,
            "move": self.handle_move,
            "edit": self.handle_edit,
            "info": self.handle_info,
        }

        handler = handlers.get(args[0].lower())
        if handler is None:
            self.show_help(sender)
            return True

        logger.debug(f"{sender.name} issued /hologram {' '.join(args)}")
        return handler(sender, args)

    def _lookup(self, sender: Any, hologram_id: str) -> Optional[Hologram]:
        hologram = self.manager.get_hologram(hologram_id)
        if hologram is None:
            sender.send_message(RED + f"No hologram found with ID '{hologram_id}'.")
        return hologram

    @staticmethod
    def _parse_line_number(sender: Any, hologram: Hologram, value: str) -> Optional[int]:
        """Convert a 1-based line number argument to a 0-based index"""
        try:
            line_index = int(value) - 1
        except ValueError:
            sender.send_message(RED + "Line index must be a number.")
            return None

        size = len(hologram.lines)
        if not 0 <= line_index < size:
            sender.send_message(RED + f"Invalid line index. The hologram has {size} lines (1-{size}).")
            return None
        return line_index

    def handle_create(self, sender: Any, args: List[str]) -> bool:
        # /hologram create <id> <text...>
        if len(args) < 3:
            sender.send_message(RED + "Usage: /hologram create <id> <text...>")
            return True

        hologram_id = args[1]

        if self.manager.get_hologram(hologram_id) is not None:
            sender.send_message(RED + f"A hologram with ID '{hologram_id}' already exists.")
            return True

        if sender.location is None:
            sender.send_message(RED + "Your location is unknown.")
            return True

        # Remaining arguments form the first line
        text = " ".join(args[2:])

        hologram = self.manager.create_hologram(hologram_id, sender.location, [text])
        hologram.show()

        sender.send_message(GREEN + f"Hologram '{hologram_id}' created successfully.")
        return True

    def handle_remove(self, sender: Any, args: List[str]) -> bool:
        # /hologram remove <id>
        if len(args) < 2:
            sender.send_message(RED + "Usage: /hologram remove <id>")
            return True

        hologram_id = args[1]

        if self.manager.remove_hologram(hologram_id):
            sender.send_message(GREEN + f"Hologram '{hologram_id}' removed successfully.")
        else:
            sender.send_message(RED + f"No hologram found with ID '{hologram_id}'.")
        return True

    def handle_list(self, sender: Any, args: List[str]) -> bool:
        holograms = self.manager.get_all_holograms()

        if not holograms:
            sender.send_message(YELLOW + "There are no holograms.")
            return True

        sender.send_message(GREEN + "List of holograms:")
        for hologram_id in sorted(holograms):
            hologram = holograms[hologram_id]
            sender.send_message(
                AQUA + f"- {hologram_id}" +
                GRAY + f" ({hologram.location.rounded()}) " +
                YELLOW + f"{len(hologram.lines)} line(s)")
        return True

    def handle_teleport(self, sender: Any, args: List[str]) -> bool:
        # /hologram tp <id>
        if len(args) < 2:
            sender.send_message(RED + "Usage: /hologram tp <id>")
            return True

        hologram = self._lookup(sender, args[1])
        if hologram is None:
            return True

        sender.teleport(hologram.location)
        sender.send_message(GREEN + f"Teleported to hologram '{hologram.id}'.")
        return True

    def handle_add_line(self, sender: Any, args: List[str]) -> bool:
        # /hologram addline <id> <text...>
        if len(args) < 3:
            sender.send_message(RED + "Usage: /hologram addline <id> <text...>")
            return True

        hologram = self._lookup(sender, args[1])
        if hologram is None:
            return True

        hologram.add_line(" ".join(args[2:]))
        self.manager.save_hologram(hologram)

        sender.send_message(GREEN + f"Added line to hologram '{hologram.id}'.")
        return True

    def handle_remove_line(self, sender: Any, args: List[str]) -> bool:
        # /hologram removeline <id> <line_number>
        if len(args) < 3:
            sender.send_message(RED + "Usage: /hologram removeline <id> <line_index>")
            return True

        hologram = self._lookup(sender, args[1])
        if hologram is None:
            return True

        line_index = self._parse_line_number(sender, hologram, args[2])
        if line_index is None:
            return True

        if hologram.remove_line(line_index):
            self.manager.save_hologram(hologram)
            sender.send_message(GREEN + f"Removed line {line_index + 1} from hologram '{hologram.id}'.")
        return True

    def handle_move(self, sender: Any, args: List[str]) -> bool:
        # /hologram move <id>
        if len(args) < 2:
            sender.send_message(RED + "Usage: /hologram move <id>")
            return True

        hologram = self._lookup(sender, args[1])
        if hologram is None:
            return True

        if sender.location is None:
            sender.send_message(RED + "Your location is unknown.")
            return True

        hologram.update_location(sender.location)
        self.manager.save_hologram(hologram)

        sender.send_message(GREEN + f"Moved hologram '{hologram.id}' to your location.")
        return True

    def handle_edit(self, sender: Any, args: List[str]) -> bool:
        # /hologram edit <id> <line_number> <new_text...>
        if len(args) < 4:
            sender.send_message(RED + "Usage: /hologram edit <id> <line_index> <new_text...>")
            return True

        hologram = self._lookup(sender, args[1])
        if hologram is None:
            return True

        line_index = self._parse_line_number(sender, hologram, args[2])
        if line_index is None:
            return True

        if hologram.set_line(line_index, " ".join(args[3:])):
            self.manager.save_hologram(hologram)
            sender.send_message(GREEN + f"Updated line {line_index + 1} of hologram '{hologram.id}'.")
        return True

    def handle_info(self, sender: Any, args: List[str]) -> bool:
        # /hologram info <id>
        if len(args) < 2:
            sender.send_message(RED + "Usage: /hologram info <id>")
            return True

        hologram = self._lookup(sender, args[1])
        if hologram is None:
            return True

        lines = hologram.lines

        sender.send_message(GREEN + f"Information for hologram '{hologram.id}':")
        sender.send_message(YELLOW + "Location: " + GRAY + hologram.location.rounded())
        sender.send_message(YELLOW + f"Lines ({len(lines)}):")
        for number, line in enumerate(lines, start=1):
            sender.send_message(AQUA + f"  {number}: " + WHITE + line)
        return True

    def show_help(self, sender: Any):
        sender.send_message(GREEN + "=== Hologram Commands ===")
        for usage, description in [
            ("/hologram create <id> <text>", "Create a new hologram"),
            ("/hologram remove <id>", "Remove a hologram"),
            ("/hologram list", "List all holograms"),
            ("/hologram tp <id>", "Teleport to a hologram"),
            ("/hologram addline <id> <text>", "Add a line to a hologram"),
            ("/hologram removeline <id> <line_number>", "Remove a line"),
            ("/hologram edit <id> <line_number> <new_text>", "Edit a line"),
            ("/hologram move <id>", "Move hologram to your location"),
            ("/hologram info <id>", "Show hologram information"),
        ]:
            sender.send_message(AQUA + usage + " " + GRAY + "- " + description)

    def on_tab_complete(self, sender: Any, args: List[str]) -> List[str]:
        if len(args) == 1:
            return filter_completions(SUBCOMMANDS, args[0])

        # Commands that take a hologram ID as second argument
        if len(args) == 2 and args[0].lower() in ID_SUBCOMMANDS:
            return filter_completions(sorted(self.manager.get_all_holograms()), args[1])

        return []


def filter_completions(options: List[str], partial: str) -> List[str]:
    return [option for option in options if option.lower().startswith(partial.lower())]
