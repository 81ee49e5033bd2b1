"""
Tab List

Keeps the player list header and footer of every online player up to date.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from .colors import translate_color_codes
from .config import TICKS_PER_SECOND
from .config_loader import get_option
from .scheduler import ScheduledTask, TaskScheduler
from .world import SessionBackend

logger = logging.getLogger(__name__)

DEFAULT_HEADER = "&b&lFrostCraft Development Server"
DEFAULT_FOOTER = "&7Have a great time on our server!"


class TabListUpdater:
    """Periodic tab list header/footer refresh"""

    def __init__(self, config: Dict, sessions: SessionBackend, scheduler: TaskScheduler):
        self.config = config
        self.sessions = sessions
        self.scheduler = scheduler
        self.task: Optional[ScheduledTask] = None

    @property
    def enabled(self) -> bool:
        return bool(get_option(self.config, 'tab-list.enabled', True))

    def header_footer(self) -> Tuple[str, str]:
        header = translate_color_codes(get_option(self.config, 'tab-list.header', DEFAULT_HEADER))
        footer = translate_color_codes(get_option(self.config, 'tab-list.footer', DEFAULT_FOOTER))
        return header, footer

    def start(self):
        """Start (or restart) the recurring update task"""
        self.stop()

        interval = int(get_option(self.config, 'tab-list.update-interval', 30)) * TICKS_PER_SECOND

        # 1 second delay before the first scheduled run
        self.task = self.scheduler.run_task_timer(self.update_all, TICKS_PER_SECOND, max(interval, 1))
        logger.debug(f"Tab list task scheduled every {interval} ticks")

        # Update immediately for players already online
        self.update_all()

    def stop(self):
        if self.task is not None:
            self.task.cancel()
            self.task = None

    def update_all(self):
        """Update the header and footer for all online players"""
        if not self.enabled:
            return

        header, footer = self.header_footer()
        for player in self.sessions.online_players():
            self.sessions.set_header_footer(player, header, footer)

    def apply(self, player: Any):
        """Set the header and footer for a single player (e.g. on join)"""
        if not self.enabled:
            return

        header, footer = self.header_footer()
        self.sessions.set_header_footer(player, header, footer)
