"""Command that connects to the graphics front end and plays the game it relays."""

from __future__ import annotations

import argparse
import time
from typing import Optional, Sequence

from .game import Game
from .pipe import DEFAULT_PIPE_NAME, GraphicsPipe

QUIT_MESSAGE = "quit"
RETRY_DELAY = 5.0


def run_session(pipe, game: Game) -> None:
    """Send the opening board, then answer each move until the front end quits."""
    pipe.send(game.init_game())
    message = pipe.receive()
    while message and message != QUIT_MESSAGE:
        result = game.move(message)
        print(game.board.render())
        pipe.send(result.value)
        message = pipe.receive()


def _connect(pipe: GraphicsPipe) -> bool:
    while True:
        try:
            pipe.connect()
            return True
        except ConnectionError:
            print("cant connect to graphics")
            print("Do you try to connect again or exit? (0-try again, 1-exit)")
            try:
                answer = input().strip()
            except EOFError:
                answer = ""
            if answer != "0":
                pipe.close()
                return False
            print("trying connect again..")
            time.sleep(RETRY_DELAY)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Chess engine for the graphics front end.")
    parser.add_argument("--pipe", default=DEFAULT_PIPE_NAME, help="name of the pipe to connect to")
    args = parser.parse_args(argv)

    pipe = GraphicsPipe(args.pipe)
    if not _connect(pipe):
        return 1
    try:
        run_session(pipe, Game())
    finally:
        pipe.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())