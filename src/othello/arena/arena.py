"""
Arena for playing automated players against each other.
"""
import json
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional, Tuple

from tqdm import tqdm

from ..game import BoardState, ReversiGame, Stone
from ..search import Player

logger = logging.getLogger(__name__)


def compute_move(player: Player, board: BoardState,
                 min_duration: float = 0.0) -> Optional[Tuple[int, int]]:
    """
    Ask a player for a move on a worker thread, taking at least min_duration.

    The search and a timer run side by side; the move is returned once both
    are done, so quick players still appear to think for min_duration seconds.

    Args:
        player: The player to ask
        board: The current position; the player receives a copy
        min_duration: Minimum wall-clock time in seconds

    Returns:
        The player's move, or None if it has to pass
    """
    snapshot = board.copy()
    if min_duration <= 0:
        return player.choose_move(snapshot)

    with ThreadPoolExecutor(max_workers=2) as executor:
        finder = executor.submit(player.choose_move, snapshot)
        timer = executor.submit(time.sleep, min_duration)
        timer.result()
        return finder.result()


def play_out(black: Player, white: Player, board: Optional[BoardState] = None,
             min_move_duration: float = 0.0) -> ReversiGame:
    """
    Play a full game between two players.

    Args:
        black: Player for the black stones
        white: Player for the white stones
        board: Starting position (default: the standard 8x8 start)
        min_move_duration: Minimum seconds per automated move

    Returns:
        The finished game

    Raises:
        RuntimeError: If a player picks an illegal move, or passes while it
            has a legal move
    """
    game = ReversiGame(board=board) if board is not None else ReversiGame()

    while not game.is_game_over():
        player = black if game.get_current_player() is Stone.BLACK else white
        move = compute_move(player, game.board, min_move_duration)
        if move is None:
            if not game.pass_turn():
                raise RuntimeError(f"{player!r} chose to pass with legal moves available")
        elif not game.make_move(*move):
            raise RuntimeError(f"{player!r} chose illegal move {move}")

    return game


class Arena:
    """
    Arena for running games and tournaments between players.

    Standings award one point per win and half a point per draw. Disc
    difference summed over all games breaks ties on the leaderboard.
    """

    def __init__(self, board_size: int = 8, min_move_duration: float = 0.0):
        """
        Initialize the arena.

        Args:
            board_size: Size of the board every game starts on
            min_move_duration: Minimum seconds per move
        """
        self.board_size = board_size
        self.min_move_duration = min_move_duration
        self.players: Dict[str, Player] = {}
        self.standings: Dict[str, Dict[str, Any]] = {}

    def add_player(self, player_id: str, player: Player):
        """Add a player to the arena."""
        if player_id in self.players:
            raise ValueError(f"Player already registered: {player_id}")
        self.players[player_id] = player
        self.standings[player_id] = {
            'games_played': 0, 'wins': 0, 'losses': 0, 'draws': 0,
            'points': 0.0, 'disc_difference': 0,
        }

    def play_game(self, black_id: str, white_id: str, verbose: bool = False) -> Dict[str, Any]:
        """
        Play a single game between two registered players and update standings.

        Args:
            black_id: ID of the player with the black stones (moves first)
            white_id: ID of the player with the white stones
            verbose: Whether to log the final position

        Returns:
            Game record with both disc counts and black's score
            (1.0 win, 0.5 draw, 0.0 loss)
        """
        if black_id not in self.players or white_id not in self.players:
            raise ValueError(f"One or both players not found: {black_id}, {white_id}")

        game = play_out(self.players[black_id], self.players[white_id],
                        BoardState(self.board_size), self.min_move_duration)

        black_count, white_count = game.get_score()
        if verbose:
            logger.info("%s (Black) vs %s (White)\n%s", black_id, white_id, game)
        else:
            logger.debug("%s (Black) %d - %d %s (White)", black_id, black_count, white_count, white_id)

        if black_count > white_count:
            score = 1.0
        elif white_count > black_count:
            score = 0.0
        else:
            score = 0.5

        self._record(black_id, score, black_count - white_count)
        self._record(white_id, 1.0 - score, white_count - black_count)

        return {
            'black': black_id,
            'white': white_id,
            'black_count': black_count,
            'white_count': white_count,
            'score': score,
        }

    def _record(self, player_id: str, score: float, disc_difference: int):
        entry = self.standings[player_id]
        entry['games_played'] += 1
        entry['points'] += score
        entry['disc_difference'] += disc_difference
        if score == 1.0:
            entry['wins'] += 1
        elif score == 0.0:
            entry['losses'] += 1
        else:
            entry['draws'] += 1

    def get_leaderboard(self) -> List[Dict[str, Any]]:
        """Standings sorted by points, then by disc difference."""
        leaderboard = [{'player_id': player_id, **entry} for player_id, entry in self.standings.items()]
        leaderboard.sort(key=lambda x: (x['points'], x['disc_difference']), reverse=True)
        return leaderboard

    def run_tournament(self, rounds: int = 10, verbose: bool = False,
                       show_progress: bool = True) -> Dict[str, Any]:
        """
        Run a round-robin tournament between all players.

        Every pair meets once per round; colours alternate between rounds.

        Args:
            rounds: Number of rounds to play
            verbose: Whether to log every finished game
            show_progress: Whether to show a progress bar

        Returns:
            Dictionary with per-matchup tallies, game records and the leaderboard
        """
        player_ids = list(self.players.keys())
        if len(player_ids) < 2:
            raise ValueError("Need at least 2 players for a tournament")

        pairs = [(player_ids[i], player_ids[j])
                 for i in range(len(player_ids)) for j in range(i + 1, len(player_ids))]

        results: Dict[str, Any] = {
            'games_played': 0,
            'matchups': {
                f"{p1}_vs_{p2}": {'player1': p1, 'player2': p2, 'games_played': 0,
                                  'wins1': 0, 'wins2': 0, 'draws': 0}
                for p1, p2 in pairs
            },
            'start_time': time.time(),
            'games': [],
        }

        for round_num in tqdm(range(rounds), desc="Tournament rounds", disable=not show_progress):
            for p1, p2 in pairs:
                black, white = (p2, p1) if round_num % 2 else (p1, p2)
                record = self.play_game(black, white, verbose=verbose)

                tally = results['matchups'][f"{p1}_vs_{p2}"]
                tally['games_played'] += 1
                p1_score = record['score'] if black == p1 else 1.0 - record['score']
                if p1_score == 1.0:
                    tally['wins1'] += 1
                elif p1_score == 0.0:
                    tally['wins2'] += 1
                else:
                    tally['draws'] += 1

                results['games_played'] += 1
                results['games'].append({'round': round_num + 1, **record})

        results['end_time'] = time.time()
        results['duration'] = results['end_time'] - results['start_time']
        results['leaderboard'] = self.get_leaderboard()
        return results

    def format_leaderboard(self) -> str:
        """Render the current standings as a table."""
        lines = [
            "Rank  Player ID               Points    W    D    L   Discs",
            "----  ---------------------  ------  ---  ---  ---  ------",
        ]
        for i, p in enumerate(self.get_leaderboard(), 1):
            lines.append(f"{i:4d}  {p['player_id']:22s}  {p['points']:6.1f}  {p['wins']:3d}  "
                         f"{p['draws']:3d}  {p['losses']:3d}  {p['disc_difference']:+6d}")
        return "\n".join(lines)

    def save_results(self, filepath: str, results: Dict[str, Any]):
        """Save tournament results to a JSON file."""
        with open(filepath, 'w') as f:
            json.dump(results, f, indent=2)
