#!/usr/bin/env python3
"""
Human Play Mode - Defend the line against the invader formation.

Controls:
    Arrow Keys or A/D: Move the cannon
    Space: Fire
    R: Restart
    ESC: Quit
"""
import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from invaders.game.engine import SimulationEngine
from invaders.game.renderer import InvadersRenderer
from invaders.shell.app import GameShell
from invaders.utils.config_loader import load_config, save_config
from invaders.utils.logger import setup_logging


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Invaders")
    parser.add_argument("--config", type=str, default=None,
                        help="Path to config YAML (default: config.yaml)")
    parser.add_argument("--scale", type=float, default=None,
                        help="Window pixels per arena unit (overrides config)")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Log level, e.g. DEBUG or INFO (overrides config)")
    parser.add_argument("--dump-config", type=str, default=None, metavar="PATH",
                        help="Write the effective config to PATH and exit")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for human play mode."""
    args = parse_args(argv)

    config = load_config(args.config)
    if args.scale is not None:
        config.display.scale = args.scale
    if args.log_level is not None:
        config.logging.level = args.log_level

    setup_logging(config.logging)

    if args.dump_config:
        save_config(config, args.dump_config)
        print(f"Config written to {args.dump_config}")
        return

    engine = SimulationEngine()
    renderer = InvadersRenderer(scale=config.display.scale)
    shell = GameShell(engine, renderer, config)

    print("\n" + "=" * 50)
    print("Invaders - Human Mode")
    print("=" * 50)
    print("Controls:")
    print("  Arrow Keys / A,D: Move")
    print("  Space: Shoot")
    print("  R: Restart")
    print("  ESC: Quit")
    print("=" * 50 + "\n")

    shell.run()


if __name__ == "__main__":
    main()
