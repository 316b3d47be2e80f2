"""Command-line entry point: run the bot, or solve a saved game snapshot."""

from __future__ import annotations

import argparse
import json
import logging
import time

from aislobsterble.board import BoardState
from aislobsterble.client import SlobsterbleClient
from aislobsterble.config import BotConfig, config as default_config
from aislobsterble.controller import Controller
from aislobsterble.dictionary import Dictionary
from aislobsterble.engine import MoveEngine
from aislobsterble.models import GameState
from aislobsterble.rack import Rack

log = logging.getLogger("aislobsterble")


def solve_snapshot(dictionary: Dictionary, path: str, top_n: int = 10) -> None:
    """Print the best moves for a game snapshot stored as JSON."""
    with open(path, "r", encoding="utf-8") as f:
        state = GameState.model_validate(json.load(f))
    board = BoardState.from_game_state(state)
    rack = Rack.from_game_state(state)
    engine = MoveEngine(dictionary)

    print(board)
    print(f"\nRack: {rack}")
    print("Searching for best moves...\n")

    t0 = time.time()
    best_moves = engine.find_best_moves(board, rack, top_n=top_n)
    elapsed = time.time() - t0

    print(f"Found {len(best_moves)} moves in {elapsed:.2f}s.\n")

    if not best_moves:
        print("No valid moves found. Check the snapshot's board and rack.")
        return

    print("=" * 65)
    print(f" {'#':>2}  {'Score':>5}  {'Word':<15} {'Position':<10} {'Dir':>3}  Extra")
    print("-" * 65)
    for i, m in enumerate(best_moves):
        first = m.placement[0]
        extra_parts: list[str] = []
        if m.is_bingo:
            extra_parts.append("BINGO +50")
        if m.cross_words:
            extra_parts.append(f"Cross: {', '.join(m.cross_words)}")
        extra = "  ".join(extra_parts)
        arrow = m.axis.arrow if m.axis else " "
        print(f" {i+1:>2}  {m.score:>5}  {m.word:<15} ({first.row},{first.col}){'':<5} {arrow:>3}   {extra}")
    print("=" * 65)

    best = best_moves[0]
    print(f"\nBEST MOVE: '{best.word}' for {best.score} points!")
    print("   Tiles to place: ", end="")
    for pt in best.placement:
        print(f"{pt.tile}>({pt.row},{pt.col}) ", end="")
    print()


def run_bot(settings: BotConfig, dictionary: Dictionary, once: bool = False) -> None:
    client = SlobsterbleClient(settings)
    engine = MoveEngine(dictionary)
    controller = Controller(settings, client, engine)
    log.info(
        "Polling %s every %ds as '%s'",
        settings.root_url, settings.poll_interval_seconds, settings.display_name,
    )
    controller.run(max_cycles=1 if once else None)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="AI Slobsterble -- plays its turns in every active game",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    parser.add_argument("--once", action="store_true",
                        help="Run a single poll cycle and exit")
    parser.add_argument("--snapshot", type=str, default=None,
                        help="Solve a game state JSON file offline instead of polling")
    parser.add_argument("--top", type=int, default=10,
                        help="Number of moves to list in --snapshot mode")
    args = parser.parse_args(argv)

    settings = default_config
    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    dictionary = Dictionary.load(args.dict or settings.dictionary_path)

    if args.snapshot:
        solve_snapshot(dictionary, args.snapshot, top_n=args.top)
        return

    try:
        run_bot(settings, dictionary, once=args.once)
    except KeyboardInterrupt:
        log.info("Interrupted, exiting.")


if __name__ == "__main__":
    main()
