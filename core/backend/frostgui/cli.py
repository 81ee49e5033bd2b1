"""
Command-Line Interface

Entry point for the frostgui console tool: runs /hologram commands against
a server hosted on a Pterodactyl panel.
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

import requests

from . import __version__
from .commands import HologramCommand
from .config import DATA_DIR, DEFAULT_LINE_SPACING
from .config_loader import get_option, load_config, validate_config
from .hologram_manager import HologramManager
from .pterodactyl import PanelPlayer, PanelWorld
from .world import Location

logger = logging.getLogger(__name__)


# Logging setup
def setup_logging(data_dir: Path, verbose: bool = False):
    """Configure logging for CLI"""
    log_dir = data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"frostgui-{datetime.now().strftime('%Y%m%d%H%M%S')}.log"

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8'),
            logging.StreamHandler()
        ]
    )


def run_hologram_command(config: dict, data_dir: Path, player_name: str,
                         location: Location, command_args: list[str]) -> int:
    """
    Execute one /hologram command on the panel-hosted server

    Stale hologram entities are purged first; afterwards every hologram is
    rendered again and the store is checkpointed.

    Returns:
        Exit code (0 = success)
    """
    world = PanelWorld.from_config(config['panel'])

    logger.info("Clearing hologram entities from previous runs...")
    world.purge()

    spacing = float(get_option(config, 'holograms.line-spacing', DEFAULT_LINE_SPACING))
    manager = HologramManager(world, data_dir, spacing)

    player = PanelPlayer(world, player_name, location)
    HologramCommand(manager, config).on_command(player, command_args)

    if get_option(config, 'holograms.enabled', True):
        manager.show_all_holograms()
        logger.info(f"✓ Rendered {len(manager.holograms)} hologram(s)")

    if not manager.save_all_holograms():
        logger.error("✗ Failed to save holograms")
        return 1

    return 0


def main(argv=None):
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        prog="frostgui",
        description=f"FrostGUI v{__version__} - Manage holograms on a Pterodactyl-hosted Minecraft server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create a hologram at spawn
  %(prog)s --at world,0,64,0 create welcome "&bWelcome to the server"

  # Add a second line
  %(prog)s addline welcome "&7Have fun!"

  # Edit or remove a line (line numbers start at 1)
  %(prog)s edit welcome 2 "&7Read the rules"
  %(prog)s removeline welcome 2

  # Move a hologram, teleport a player to it
  %(prog)s --at world,10,70,-5 move welcome
  %(prog)s --as Steve tp welcome

  # Show holograms
  %(prog)s list
  %(prog)s info welcome

Configuration (config.yml):
  panel:
    panel_url: https://panel.example.com
    api_key: ${PTERODACTYL_API_KEY}
    server: 1a2b3c4d
    worlds:
      world: minecraft:overworld
        """
    )

    parser.add_argument("--config", type=Path, help="Path to config file (overrides default search paths)")
    parser.add_argument("--data-dir", type=Path, default=DATA_DIR, help=f"Plugin data folder (default: {DATA_DIR})")
    parser.add_argument("--as", dest="player", default="Console", help="In-game player the command acts for")
    parser.add_argument("--at", dest="location", help="Location as world,x,y,z (for create and move)")
    parser.add_argument("--verbose", action="store_true", help="Log every console command sent")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("command", nargs=argparse.REMAINDER, help="/hologram arguments, e.g. create <id> <text...>")

    args = parser.parse_args(argv)

    setup_logging(args.data_dir, args.verbose)

    try:
        location = Location.parse(args.location) if args.location else None
    except ValueError as e:
        logger.error(f"✗ Invalid --at value: {e}")
        return 1

    try:
        config = load_config(args.config, args.data_dir)

        is_valid, errors = validate_config(config)
        if not is_valid:
            logger.error("\n✗ Configuration validation failed:")
            for error in errors:
                logger.error(f"  - {error}")
            return 1

        if not config.get('panel'):
            logger.error("\n✗ No panel configuration found")
            logger.info("Add a 'panel' section with panel_url, api_key and server to config.yml")
            return 1

        return run_hologram_command(config, args.data_dir, args.player, location, args.command)

    except requests.RequestException as e:
        logger.error(f"\n✗ Panel request failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("\n\nInterrupted by user")
        return 130
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
