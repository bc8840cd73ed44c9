"""
Arcade CLI - Command-line interface for the engines.

Usage:
    arcade solve [--size N] [--seed S]          Generate and solve a Lights Out board
    arcade play {2048,snake,tictactoe,lights-out} [--seed S]
    arcade scores                               Show stored best scores
    arcade serve [--host H] [--port P]          Run the REST API

Play is a plain text loop over a session; it exists to exercise the
engines, not to be a good front end.
"""

import argparse
import logging
import os
import sys

from .engine_core.action import Action

GAME_ALIASES = {
    "2048": "2048",
    "snake": "snake",
    "tictactoe": "tictactoe",
    "lights-out": "lights_out",
}

KEY_DIRECTIONS = {
    "w": "up", "a": "left", "s": "down", "d": "right",
    "up": "up", "left": "left", "down": "down", "right": "right",
}


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Arcade - 2048, Snake, Tic-Tac-Toe and Lights Out engines",
        prog="arcade",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("ARCADE_LOG_LEVEL", "WARNING"),
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    parser.add_argument(
        "--scores-dir",
        default=os.getenv("ARCADE_SCORES_DIR"),
        help="Directory for stored scores (default ~/.arcade/scores)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Generate and solve a Lights Out board")
    solve_parser.add_argument("--size", type=int, default=5, help="Board size (1-8)")
    solve_parser.add_argument("--seed", type=int, help="Random seed")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a game in the terminal")
    play_parser.add_argument("game", choices=sorted(GAME_ALIASES), help="Game to play")
    play_parser.add_argument("--seed", type=int, help="Random seed")

    # Scores command
    subparsers.add_parser("scores", help="Show stored best scores and scoreboards")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the REST API with uvicorn")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "solve":
        return cmd_solve(args)
    elif args.command == "play":
        return cmd_play(args)
    elif args.command == "scores":
        return cmd_scores(args)
    elif args.command == "serve":
        return cmd_serve(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_solve(args):
    """Generate a solvable Lights Out board and print its optimal solution."""
    from .engine_core.rng import make_rng
    from .games.lights_out import random_solvable_board, solve_optimal
    from .games.lights_out.logic import is_valid_size

    if not is_valid_size(args.size):
        print(f"Error: size must be between 1 and 8, got {args.size}")
        sys.exit(1)

    board = random_solvable_board(args.size, make_rng(args.seed))
    print(render_lights(board, args.size))

    solution = solve_optimal(board, args.size)
    if solution is None:
        print("\nUnsolvable")
        return 1

    print(f"\nOptimal solution: {solution.moves} press(es)")
    marks = ["X" if pressed else "." for pressed in solution.presses]
    print(render_grid(marks, args.size))
    print("Cells:", ", ".join(str(i) for i in solution.indices) or "none")
    return 0


def cmd_scores(args):
    """List everything in the score store."""
    store = _make_store(args)
    keys = store.keys()
    if not keys:
        print("No scores stored")
        return 0
    for key in keys:
        print(f"{key}: {store.get(key)}")
    return 0


def cmd_serve(args):
    """Run the REST API."""
    import uvicorn

    uvicorn.run("arcade.api.app:app", host=args.host, port=args.port)
    return 0


def cmd_play(args):
    """Run a text play loop for one game."""
    from .session import SessionManager

    manager = SessionManager(store=_make_store(args))
    session = manager.create_session(GAME_ALIASES[args.game], seed=args.seed)
    loop = PLAY_LOOPS[session.game.value]

    print(f"Session created: {session.session_id}")
    try:
        loop(session)
    except (EOFError, KeyboardInterrupt):
        print()
    finally:
        manager.end_session(session.session_id)
    return 0


# =============================================================================
# Play loops
# =============================================================================

def play_2048(session):
    print("Keys: w/a/s/d to slide, k keep playing, n new game, q quit")
    session.dispatch(Action.new_game())
    while True:
        state = session.game_state
        print(render_2048(state))
        command = input("> ").strip().lower()
        if command == "q":
            return
        elif command == "n":
            session.dispatch(Action.new_game())
        elif command == "k":
            session.dispatch(Action.keep_playing())
        elif command in KEY_DIRECTIONS:
            session.dispatch(Action.move(KEY_DIRECTIONS[command]))


def play_snake(session):
    print("Keys: w/a/s/d to turn then step, enter to step, p pause/resume, n new game, q quit")
    from .games.snake import GameStatus

    session.dispatch(Action.new_game())
    while True:
        state = session.game_state
        print(render_snake(state))
        command = input("> ").strip().lower()
        if command == "q":
            return
        elif command == "n":
            session.dispatch(Action.new_game())
            continue
        elif command == "p":
            if state.status is GameStatus.PAUSED:
                session.dispatch(Action.resume())
            else:
                session.dispatch(Action.pause())
            continue
        elif command in KEY_DIRECTIONS:
            session.dispatch(Action.turn(KEY_DIRECTIONS[command]))
        session.dispatch(Action.tick())


def play_tictactoe(session):
    print("Keys: 1-9 to place, u undo, n new round, m switch mode, q quit")
    from .games.tictactoe import Mode

    while True:
        state = session.game_state
        print(render_tictactoe(state))
        board = session.scoreboard()
        print(f"[{state.mode.value}] X {board['X']}  O {board['O']}  draws {board['draws']}")
        command = input("> ").strip().lower()
        if command == "q":
            return
        elif command == "u":
            session.dispatch(Action.undo())
        elif command == "n":
            session.dispatch(Action.new_game(alternate_starter=True))
        elif command == "m":
            other = Mode.BOLT if state.mode is Mode.CLASSIC else Mode.CLASSIC
            session.dispatch(Action.set_mode(other.value))
        elif command.isdigit() and 1 <= int(command) <= 9:
            session.dispatch(Action.play(int(command) - 1))


def play_lights_out(session):
    print("Keys: <row> <col> to press, h hint, n new board, z<N> resize, q quit")
    from .games.lights_out import hint

    session.dispatch(Action.new_game())
    while True:
        state = session.game_state
        print(render_lights(state.board, state.size))
        print(f"moves {state.moves}  {state.status.value}")
        command = input("> ").strip().lower()
        parts = command.split()
        if command == "q":
            return
        elif command == "n":
            session.dispatch(Action.new_game())
        elif command == "h":
            index = hint(state.board, state.size)
            if index is None:
                print("No hint")
            else:
                print(f"Try row {index // state.size + 1}, col {index % state.size + 1}")
        elif command.startswith("z") and command[1:].isdigit():
            session.dispatch(Action.set_size(int(command[1:])))
            session.dispatch(Action.new_game())
        elif len(parts) == 2 and all(p.isdigit() for p in parts):
            row, col = int(parts[0]) - 1, int(parts[1]) - 1
            if 0 <= row < state.size and 0 <= col < state.size:
                session.dispatch(Action.click(row * state.size + col))


PLAY_LOOPS = {
    "2048": play_2048,
    "snake": play_snake,
    "tictactoe": play_tictactoe,
    "lights_out": play_lights_out,
}


# =============================================================================
# Rendering
# =============================================================================

def render_grid(cells, size):
    return "\n".join(
        " ".join(cells[r * size:(r + 1) * size]) for r in range(size)
    )


def render_lights(board, size):
    return render_grid(["#" if on else "." for on in board], size)


def render_2048(state):
    cells = [str(v) if v else "." for v in state.board]
    width = max(len(c) for c in cells)
    rows = [
        " ".join(c.rjust(width) for c in cells[r * 4:(r + 1) * 4])
        for r in range(4)
    ]
    header = f"score {state.score}  best {state.best}  {state.status.value}"
    return header + "\n" + "\n".join(rows)


def render_snake(state):
    cells = ["."] * (state.size * state.size)
    if state.apple is not None:
        cells[state.apple] = "@"
    for i in state.snake[1:]:
        cells[i] = "o"
    cells[state.head] = "O"
    if state.crash_at is not None:
        cells[state.crash_at] = "X"
    header = f"score {state.score}  best {state.best}  {state.status.value}"
    return header + "\n" + render_grid(cells, state.size)


def render_tictactoe(state):
    """Bolt: the mark about to be evicted is shown in lower case."""
    oldest = state.oldest_for_current
    cells = [
        str(i + 1) if mark is None
        else mark.value.lower() if i == oldest
        else mark.value
        for i, mark in enumerate(state.board)
    ]
    header = f"{state.status.value}" + (f", {state.current.value} to move" if state.in_progress else "")
    return header + "\n" + render_grid(cells, 3)


def _make_store(args):
    from .session import FileScoreStore

    return FileScoreStore(scores_dir=args.scores_dir)


if __name__ == "__main__":
    sys.exit(main())
