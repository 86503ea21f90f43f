"""
Script for running tournaments between automated Othello players.
"""
import os
import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.arena import Arena
from othello.config import Config, PlayerConfig, get_default_config
from othello.logger import setup_logger
from othello.search import create_player

logger = logging.getLogger("othello.tournament")


def build_player(player_config: PlayerConfig):
    """Create a player from its configuration."""
    kwargs = {}
    if player_config.kind == "lookahead":
        kwargs['turns'] = player_config.lookahead_turns
    return create_player(player_config.kind, seed=player_config.seed, **kwargs)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Run a tournament between Othello players')

    parser.add_argument('--config', type=str, default=None,
                        help='Path to a JSON config file (default: built-in line-up)')
    parser.add_argument('--rounds', type=int, default=None,
                        help='Number of rounds to play (overrides the config)')
    parser.add_argument('--board-size', type=int, default=None,
                        help='Board size (overrides the config)')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Directory to save tournament results (overrides the config)')
    parser.add_argument('--verbose', action='store_true',
                        help='Log every finished game')

    args = parser.parse_args(argv)

    if args.config is not None:
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.rounds is not None:
        config.arena.rounds = args.rounds
    if args.board_size is not None:
        config.board.size = args.board_size
    if args.output_dir is not None:
        config.arena.output_dir = args.output_dir
    if args.verbose:
        config.logging.verbose = True

    run_logger = setup_logger(config)
    try:
        os.makedirs(config.arena.output_dir, exist_ok=True)

        arena = Arena(board_size=config.board.size,
                      min_move_duration=config.arena.min_move_duration)
        for i, player_config in enumerate(config.players):
            player_id = player_config.name or f"{player_config.kind}_{i}"
            arena.add_player(player_id, build_player(player_config))

        if len(arena.players) < 2:
            logger.error("Need at least 2 players to start a tournament")
            return 1

        logger.info("Starting tournament with %d rounds: %s",
                    config.arena.rounds, ", ".join(arena.players))
        results = arena.run_tournament(rounds=config.arena.rounds, verbose=args.verbose)

        for step, player in enumerate(results['leaderboard'], 1):
            run_logger.log_metrics({'player': player['player_id'], 'points': player['points'],
                                    'wins': player['wins'], 'draws': player['draws'],
                                    'losses': player['losses']},
                                   step, prefix='leaderboard/')

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        results_file = os.path.join(config.arena.output_dir, f'tournament_{timestamp}.json')
        with open(results_file, 'w') as f:
            json.dump({
                'timestamp': timestamp,
                'rounds': config.arena.rounds,
                'board_size': config.board.size,
                'participants': list(arena.players.keys()),
                'matchups': results['matchups'],
                'leaderboard': results['leaderboard'],
            }, f, indent=2)

        logger.info("Tournament completed! Results saved to %s", results_file)
        print("\nFinal Leaderboard:")
        print(arena.format_leaderboard())
    finally:
        run_logger.close()

    return 0


if __name__ == '__main__':
    sys.exit(main())
