from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np


def _ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src = root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play tic-tac-toe against the engine in a terminal.")
    parser.add_argument("--difficulty", "--level", default="hard", choices=["easy", "medium", "hard"])
    parser.add_argument("--human-player", "--human-side", default="X", choices=["X", "O"])
    parser.add_argument("--seed", type=int, default=-1, help="RNG seed for easy mode; <0 for random.")
    return parser.parse_args()


def _render(cells: list[str]) -> str:
    shown = [cell if cell else str(idx) for idx, cell in enumerate(cells)]
    rows = [" | ".join(shown[r * 3 : r * 3 + 3]) for r in range(3)]
    return "\n---------\n".join(rows)


def _read_position(prompt: str) -> int | None:
    raw = input(prompt).strip().lower()
    if raw in {"q", "quit", "exit"}:
        return None
    try:
        return int(raw)
    except ValueError:
        return -1


def main() -> None:
    _ensure_src_on_path()
    from game.errors import GameError
    from game.rules import player_symbol
    from game.session import GameSession

    args = _parse_args()
    ai_player = "O" if args.human_player == "X" else "X"
    rng = np.random.default_rng(seed=None if args.seed < 0 else args.seed)
    session = GameSession(ai_player=ai_player, rng=rng)

    print(f"You are {args.human_player}. AI plays {ai_player} on {args.difficulty}. Type q to quit.")
    while True:
        print()
        print(_render(session.get_board()))
        status = session.status
        if status.is_terminal:
            break

        if session.next_player == session.ai_player:
            result = session.request_ai_move(args.difficulty)
            print(f"\nAI plays {result.position}.")
            continue

        position = _read_position(f"\nYour move ({args.human_player}), 0-8: ")
        if position is None:
            print("Bye.")
            return
        try:
            session.make_move(position, args.human_player)
        except GameError as exc:
            print(f"Rejected: {exc}")

    if status.winner is None:
        print("\nIt's a draw!")
    else:
        winner = player_symbol(status.winner)
        outcome = "You win!" if winner == args.human_player else "AI wins!"
        print(f"\n{outcome} Line: {list(status.line or ())}")


if __name__ == "__main__":
    main()
