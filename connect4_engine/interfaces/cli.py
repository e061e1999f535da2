"""
cli.py - Command-line host for the Connect Four engine

This module provides a hot-seat CLI for two players sharing a terminal and a
benchmark comparing the full-board win scan with the localized check.
"""

import argparse
import sys
import time
from typing import Dict, List, Optional, Union

import numpy as np

from connect4_engine.debug import debug, DebugLevel
from connect4_engine.errors import Connect4Error
from connect4_engine.game.rules import ConnectFourGame, RejectReason
from connect4_engine.utils import ROWS, COLS, check_win, check_win_at_position

# Special command codes returned by get_human_move
QUIT = "quit"
RESTART = "restart"

REJECT_MESSAGES = {
    RejectReason.INVALID_COLUMN: "Column must be between 0 and {max_col}.",
    RejectReason.COLUMN_FULL: "Column {column} is full, pick another one.",
    RejectReason.GAME_OVER: "The game is already over.",
}


class SimpleCLI:
    """Simple command-line interface for playing Connect Four."""

    def __init__(self):
        self.game: Optional[ConnectFourGame] = None
        self.args = None

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(description='Connect Four CLI')
        parser.add_argument('--debug', action='store_true',
                            help='Enable debug mode (equivalent to --debug_level debug)')
        parser.add_argument('--debug_level',
                            choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                            default='warning',
                            help='Set debug level (default: warning)')
        parser.add_argument('--log_file', type=str, help='Also write log output to this file')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play', help='Play a two-player game in the terminal')
        play_parser.add_argument('--rows', type=int, default=ROWS, help=f'Board height (default: {ROWS})')
        play_parser.add_argument('--cols', type=int, default=COLS, help=f'Board width (default: {COLS})')

        benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark win detection')
        benchmark_parser.add_argument('--iterations', type=int, default=200,
                                      help='Number of random games to play')
        benchmark_parser.add_argument('--rows', type=int, default=ROWS)
        benchmark_parser.add_argument('--cols', type=int, default=COLS)
        benchmark_parser.add_argument('--seed', type=int, default=None,
                                      help='Seed for the random move generator')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)
        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self) -> int:
        """Run the CLI based on the parsed arguments."""
        if not self.args:
            self.parse_args()

        try:
            if self.args.command == 'play':
                self.play_game(self.args.rows, self.args.cols)
            elif self.args.command == 'benchmark':
                self.benchmark(self.args.iterations, self.args.rows,
                               self.args.cols, self.args.seed)
            else:
                print("Please specify a command. Use --help for options.")
                return 1
        except Connect4Error as e:
            debug.error(str(e), "cli")
            print(f"Error: {e}")
            return 1
        return 0

    def play_game(self, rows: int = ROWS, cols: int = COLS) -> None:
        """Play a Connect Four game between two people at the same terminal."""
        self.game = ConnectFourGame(rows, cols)
        print("Starting a new Connect Four game!")
        print(f"Enter a column number (0-{cols - 1}) to drop a piece.")
        print("Other commands: 'q' to quit, 'r' to restart.")
        print(self.game.render())

        while not self.game.is_game_over():
            move = self.get_human_move()

            if move is None:
                continue
            elif move == QUIT:
                print("Quitting game.")
                return
            elif move == RESTART:
                self.game = ConnectFourGame(rows, cols)
                print("Game restarted.")
                print(self.game.render())
                continue

            result = self.game.drop_piece(move)
            if result:
                print(self.game.render())
            else:
                print(REJECT_MESSAGES[result.reason].format(max_col=cols - 1, column=move))

        print("Game over!")
        winner = self.game.get_winner()
        if winner is None:
            print("It's a draw!")
        else:
            print(f"Player {winner.value} ({winner}) wins!")
            print(f"Winning line: {self.game.get_winning_line()}")

    def get_human_move(self) -> Optional[Union[int, str]]:
        """
        Get a move from the player to move.

        Returns:
            Column index, a special command code, or None if the input was not understood
        """
        player = self.game.get_current_player()
        try:
            user_input = input(f"Player {player.value} ({player}) move: ").strip().lower()
        except EOFError:
            return QUIT

        if user_input == 'q':
            return QUIT
        elif user_input == 'r':
            return RESTART

        try:
            return int(user_input)
        except ValueError:
            print("Invalid input. Please enter a column number or a command.")
            return None

    def benchmark(self, iterations: int, rows: int = ROWS, cols: int = COLS,
                  seed: Optional[int] = None) -> Dict[str, float]:
        """
        Play random games and time both win checks after every move.

        Returns:
            Summary with move count, total seconds per check and disagreements
        """
        rng = np.random.default_rng(seed)
        full_scan_time = 0.0
        local_time = 0.0
        moves = 0
        disagreements = 0

        print(f"Benchmarking win detection over {iterations} random {rows}x{cols} games...")
        debug.start_timer("benchmark")
        for _ in range(iterations):
            game = ConnectFourGame(rows, cols)
            while not game.is_game_over():
                column = int(rng.choice(game.get_valid_moves()))
                result = game.drop_piece(column)
                grid = game.get_grid()
                move = result.move

                start = time.perf_counter()
                full = check_win(grid, move.player)
                full_scan_time += time.perf_counter() - start

                start = time.perf_counter()
                local = check_win_at_position(grid, move.row, move.column)
                local_time += time.perf_counter() - start

                moves += 1
                if full != local:
                    disagreements += 1
                    debug.error(f"Win checks disagree at {move}:\n{game.render()}", "cli")

        debug.end_timer("benchmark", "cli")

        summary = {
            'games': iterations,
            'moves': moves,
            'full_scan_seconds': full_scan_time,
            'localized_seconds': local_time,
            'disagreements': disagreements,
        }

        per_move = 1e6 / moves if moves else 0.0
        print(f"Moves checked: {moves}")
        print(f"Full-board scan: {full_scan_time:.4f}s ({full_scan_time * per_move:.2f} us/move)")
        print(f"Localized check: {local_time:.4f}s ({local_time * per_move:.2f} us/move)")
        print(f"Disagreements: {disagreements}")
        return summary


def main(argv: Optional[List[str]] = None) -> int:
    cli = SimpleCLI()
    cli.parse_args(argv)
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
