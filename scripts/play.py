#!/usr/bin/env python3
"""
CLI for playing Gomoku against the advisor pipeline.
"""
import sys
import os
import argparse
import logging

# Add the parent directory to Python path so we can import gomoku_advisor
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from gomoku_advisor.ai.agents.heuristic_agent import (HeuristicAttacker, HeuristicCommander,
                                                      HeuristicDefender)
from gomoku_advisor.ai.arbiter import DecisionArbiter
from gomoku_advisor.analysis.board_info import render_board
from gomoku_advisor.config import ArbiterConfig
from gomoku_advisor.core.board import BLACK
from gomoku_advisor.core.errors import IllegalMove, MalformedCoordinate
from gomoku_advisor.core.game import Game


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Play Gomoku against the advisor pipeline')
    parser.add_argument('--config', type=str, default=None,
                        help='Arbiter config JSON (default: built-in settings)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for the advisors and the fallback')
    parser.add_argument('--ai-first', action='store_true',
                        help='Let the AI play black')
    parser.add_argument('--verbose', action='store_true',
                        help='Show advisor logging')
    return parser.parse_args()


def get_player_name(player):
    """Get display name for player."""
    return "Black (X)" if player == BLACK else "White (O)"


def get_human_move(game):
    """
    Read moves until one is legal.

    Returns:
        BoardState or None if the user quit
    """
    while True:
        try:
            move_input = input(f"{get_player_name(game.current_player)}, enter your move (e.g. H8) or 'quit': ")
        except (KeyboardInterrupt, EOFError):
            return None

        if move_input.strip().lower() in ['quit', 'exit', 'q']:
            return None

        try:
            return game.make_move(move_input)
        except MalformedCoordinate:
            print("Invalid input! Please enter a column A-O and a row 1-15 (e.g. 'H8')")
        except IllegalMove as exc:
            print(f"Illegal move: {exc}")


def main():
    """Main game loop."""
    args = parse_args()
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')

    config = ArbiterConfig.load(args.config) if args.config else ArbiterConfig()
    if args.seed is not None:
        config.seed = args.seed

    arbiter = DecisionArbiter(attacker=HeuristicAttacker(seed=config.seed),
                              defender=HeuristicDefender(seed=config.seed),
                              commander=HeuristicCommander(),
                              config=config)
    ai_player = BLACK if args.ai_first else -BLACK

    print("=" * 60)
    print("           GOMOKU vs advisor pipeline")
    print("=" * 60)
    print("Black (X) moves first. Five in a row wins.")
    print("Enter moves as column letter + row number, e.g. 'H8'.")
    print("=" * 60)

    game = Game()
    while game.game_state == 'ongoing':
        print()
        print(render_board(game.state))

        if game.current_player == ai_player:
            decision = arbiter.decide_sync(game.state)
            print(f"\n{get_player_name(ai_player)} (AI) plays: {decision.move}")
            print(f"Reason: {decision.reason}")
            if decision.comment:
                print(f"Comment: {decision.comment}")
            game.make_move(decision.move)
        elif get_human_move(game) is None:
            print("\nThanks for playing!")
            return

    print()
    print(render_board(game.state))
    print("\n" + "=" * 60)
    if game.game_state == 'win':
        if game.winner == ai_player:
            print(f"AI ({get_player_name(game.winner)}) wins! Better luck next time!")
        else:
            print(f"CONGRATULATIONS! You ({get_player_name(game.winner)}) beat the AI!")
    else:
        print("GAME OVER - It's a draw!")
    print(f"Game completed in {game.state.move_count} moves.")
    print("=" * 60)


if __name__ == "__main__":
    main()
