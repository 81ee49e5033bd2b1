"""
Welcome Messages

Join message, first-join broadcast and personal chat welcome.
"""

import logging
from typing import Any, Dict, Optional

from .colors import translate_color_codes
from .config_loader import get_option
from .world import SessionBackend

logger = logging.getLogger(__name__)

DEFAULT_JOIN_MESSAGE = "&a{player_name} &fhas joined the server!"


class WelcomeMessages:
    """Builds and sends the configured messages when a player joins"""

    def __init__(self, config: Dict, sessions: SessionBackend):
        self.config = config
        self.sessions = sessions

    def join_message(self, player: Any) -> Optional[str]:
        """
        Join message to announce for player

        Returns:
            The formatted message, or None to suppress the default one
        """
        if not get_option(self.config, 'welcome.broadcast-join', False):
            return None

        prefix = get_option(self.config, 'messages.prefix', '')
        message = get_option(self.config, 'welcome.join-message', DEFAULT_JOIN_MESSAGE)
        return translate_color_codes(prefix + message.replace('{player_name}', player.name))

    def on_player_join(self, player: Any) -> Optional[str]:
        """
        Handle a player joining

        Sends the first-join broadcast and chat welcome, and returns the
        join message the host should display (None to hide it).
        """
        join_message = self.join_message(player)

        # Only for players who have never played before
        if (not player.has_played_before
                and get_option(self.config, 'welcome.first-join.enabled', False)
                and get_option(self.config, 'welcome.first-join.broadcast', False)):
            message = get_option(self.config, 'welcome.first-join.message', '')
            self.sessions.broadcast(translate_color_codes(message.replace('{player_name}', player.name)))
            logger.info(f"First join: {player.name}")

        if get_option(self.config, 'welcome.chat-welcome.enabled', False):
            message = get_option(self.config, 'welcome.chat-welcome.message', '')
            message = message.replace('{player_name}', player.name)
            if get_option(self.config, 'welcome.chat-welcome.colorful', True):
                message = translate_color_codes(message)
            player.send_message(message)

        return join_message
