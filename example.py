#!/usr/bin/env python3
"""
Example usage of the Connect-6 implementation.

Runs a few scripted demonstrations and, with ``--play``, an interactive
console game with a mode menu: human vs human, or human vs AI at easy,
medium or hard difficulty.
"""

import sys
import time

import numpy as np

from connect6.board import Player, Position
from connect6.config import GameConfig, setup_logging
from connect6.game import Connect6, GameMode
from connect6.players import AIPlayer, evaluate_strength, parse_move, play_game
from connect6.strategies import Difficulty


MENU_MODES = [GameMode.PVP, GameMode.PVE_EASY, GameMode.PVE_MEDIUM, GameMode.PVE_HARD]


def example_basic_game():
    """Demonstrate a short scripted game ending in a horizontal six."""
    print("=== Basic Connect-6 Game ===")

    game = Connect6()
    moves = [(7, 2), (8, 2), (7, 3), (8, 3), (7, 4), (8, 4),
             (7, 5), (8, 5), (7, 6), (9, 9), (7, 7)]
    for row, col in moves:
        player = game.current_player
        result = game.apply_move(row, col)
        if not result:
            print(f"{player.name} could not play ({row}, {col}): {result.reason.value}")
            continue
        if game.is_game_over():
            break

    print(game)
    print(f"Game result: {game.get_status().value}")
    print("\n" + "=" * 50 + "\n")


def example_ai_match():
    """Demonstrate the medium AI playing the hard AI."""
    print("=== Medium AI vs Hard AI ===")

    rng = np.random.default_rng(0)
    game = play_game(AIPlayer(Difficulty.MEDIUM, rng), AIPlayer(Difficulty.HARD, rng))
    print(game)
    opening = " ".join(f"{m.player.symbol}:{Position(m.row, m.col).notation}"
                       for m in game.get_move_history()[:6])
    print(f"Moves played: {game.get_move_count()}, opening: {opening}")
    print("\n" + "=" * 50 + "\n")


def example_evaluation():
    """Demonstrate tier-against-tier evaluation."""
    print("=== Medium AI vs Easy AI, 4 games ===")
    results = evaluate_strength(Difficulty.MEDIUM, Difficulty.EASY, num_games=4, seed=1)
    print(f"Win rate: {results['win_rate']:.2f}  Draw rate: {results['draw_rate']:.2f}")
    print("\n" + "=" * 50 + "\n")


def choose_mode() -> GameMode:
    """Show the start menu and return the chosen mode; exits on quit."""
    print("\n=== Connect-6 ===")
    for i, mode in enumerate(MENU_MODES, start=1):
        print(f"{i}. {mode.display_name}")
    print(f"{len(MENU_MODES) + 1}. Quit")

    while True:
        choice = input("Select a mode: ").strip()
        if choice == str(len(MENU_MODES) + 1) or choice.lower() == 'q':
            sys.exit(0)
        if choice.isdigit() and 1 <= int(choice) <= len(MENU_MODES):
            return MENU_MODES[int(choice) - 1]
        print("Please choose one of the listed options.")


def choose_after_game() -> str:
    """End-of-game menu: 'r' restart, 'm' main menu, 'q' quit."""
    while True:
        choice = input("[r]estart, [m]ain menu or [q]uit? ").strip().lower()
        if choice in ('r', 'm', 'q'):
            return choice


def play_interactive(config: GameConfig):
    """Interactive console game loop."""
    rng = np.random.default_rng(config.seed)
    game = Connect6(mode=config.mode, rng=rng)

    while True:
        print(f"\nGame start! {game.mode.display_name}. {Player.ONE.name} ({Player.ONE.symbol}) moves first.")

        while not game.is_game_over():
            print(game)

            if game.difficulty is not None and game.current_player == config.ai_player:
                time.sleep(config.draw_ai_delay(rng))
                pos = game.play_ai_move()
                print(f"AI plays {pos.notation}")
                continue

            try:
                text = input(f"{game.current_player.name} ({game.current_player.symbol}) move: ")
            except (EOFError, KeyboardInterrupt):
                print("\nGame quit by user")
                return
            if text.strip().lower() == 'q':
                print("Game quit by user")
                return

            try:
                pos = parse_move(text)
            except ValueError as e:
                print(f"Invalid input: {e}")
                continue

            result = game.apply_move(pos.row, pos.col)
            if not result:
                print(f"Invalid move {pos.notation}: {result.reason.value}")
                continue
            if game.difficulty is not None:
                time.sleep(config.human_move_pause)

        print(game)
        print(f"\nGame Over! Result: {game.get_status().value} "
              f"(total moves: {game.get_move_count()})")

        choice = choose_after_game()
        if choice == 'q':
            return
        if choice == 'm':
            game.reset(mode=choose_mode())
        else:
            game.reset()


def main():
    """Run all examples, or an interactive game with --play."""
    config = GameConfig()
    setup_logging(config)

    if "--play" in sys.argv:
        config.mode = choose_mode()
        play_interactive(config)
        return

    print("Connect-6 Implementation Examples")
    print("=" * 50)
    print()

    try:
        example_basic_game()
        example_ai_match()
        example_evaluation()
    except KeyboardInterrupt:
        print("\nExamples interrupted by user.")


if __name__ == "__main__":
    main()
