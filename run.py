"""
Main script to play Reversi in the terminal.
"""
import os
import sys
import argparse

from reversi.config import Config, get_default_config
from reversi.console import run_session
from reversi.game import ReversiGame
from reversi.logger import setup_logger

def load_config(config_path=None):
    """
    Load configuration from file or use defaults.

    Args:
        config_path: Path to config file. If None or missing, uses default config.

    Returns:
        Config object
    """
    if config_path and os.path.exists(config_path):
        print(f"Loading configuration from {config_path}")
        return Config.load(config_path)
    if config_path:
        print(f"Config file {config_path} not found, using default configuration")
    return get_default_config()

def main(argv=None):
    """Start a game session with the selected board size."""
    parser = argparse.ArgumentParser(description='Play Reversi in the terminal')
    parser.add_argument('--size', type=int, choices=[6, 8], default=None,
                        help='Board size (default: from config, 8)')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--log-file', action='store_true',
                        help='Also write the log to a file under the log directory')
    parser.add_argument('--log-dir', type=str, default=None,
                        help='Directory for log files')
    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.size is not None:
        config.game.board_size = args.size
    if args.log_file:
        config.logging.log_to_file = True
    try:
        config.validate()
    except ValueError as e:
        parser.error(str(e))

    logger = setup_logger(config, args.log_dir)
    try:
        game = ReversiGame(config.game.board_size)
        run_session(game, sys.stdin, allowed_sizes=config.game.allowed_sizes)
    except KeyboardInterrupt:
        print("\nGame interrupted.")
    finally:
        logger.close()

if __name__ == "__main__":
    main()
