# chessgame

A chess engine for two players who share one board. It checks every move
against the rules for the piece that is moving. It refuses a move that would
leave the mover's own king in check. It reports check and checkmate, and it
promotes a pawn to a queen when the pawn reaches the far rank.

The engine is meant to run behind a graphical front end. The front end owns
the window and the mouse. The engine receives move requests and sends back a
result code.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running against the graphics front end

Start the graphics front end first, then run:

```
chessgame
```

By default the command opens the named pipe `\\.\pipe\chessPipe`. To use a
different pipe, pass `--pipe NAME`. If the command cannot connect, it asks
whether to try again (`0`) or exit (any other answer). It waits five seconds
before each new attempt. Once connected, it sends the starting position. It
then answers each move request and prints the board after every move. It stops
when the front end sends `quit` or closes the pipe.

Messages in both directions are text that ends with a NUL byte.

## The protocol

The opening message is the 64-character board, followed by the digit of the
player who moves first (`0` for white). The board is read row by row, from
rank 8 down to rank 1. Upper-case letters are white pieces and lower-case
letters are black pieces (`K Q R B N P`). `#` marks an empty square:

```
rnbqkbnrpppppppp################################PPPPPPPPRNBQKBNR0
```

A move request names the source square and then the destination square, for
example `e2e4`. The reply is one digit:

| Code | `MoveResult` member | Meaning |
|------|---------------------|---------|
| `0` | `OK` | Legal move |
| `1` | `CHECK` | Legal move that puts the opponent in check |
| `2` | `NOT_OWN_FIGURE` | The source square does not hold one of the mover's pieces |
| `3` | `OWN_FIGURE_AT_DESTINATION` | The destination square holds one of the mover's pieces |
| `4` | `SELF_CHECK` | The move would leave the mover's own king in check |
| `5` | `INVALID_SQUARE` | A square lies off the board |
| `6` | `ILLEGAL_MOVE` | The piece cannot move that way |
| `7` | `SAME_SQUARE` | Source and destination are the same square |
| `8` | `CHECKMATE` | Legal move that checkmates the opponent |

The turn passes to the other player only after codes `0`, `1` and `8`.

## Using the engine from Python

```python
from chessgame.game import Game

game = Game()
print(game.init_game())         # starting board and first player
print(game.move("e2e4").value)  # "0": a legal opening move
print(game.move("e2e4").value)  # "2": that square is now empty, and it is black's turn
```

`Game.move` returns a `chessgame.board.MoveResult`. Its `value` is the code
from the table above, and its `successful` property tells whether the move was
made. A request shorter than four characters raises `ValueError`.
`Game.current_player` holds the `chessgame.pieces.Color` of the side to move,
and `Game.board` holds the board.

`chessgame.board.Board` takes a 64-character layout in the same form as the
opening message, so you can set up any position and play from it. A layout of
any other length raises `ValueError`. The other `Board` methods are:

- `Board.move_figure(src, dst, color)` takes a source `chessgame.point.Point`,
  a destination `Point` and the mover's `Color`, and returns a `MoveResult`.
- `Board.figure_at(point)` returns the piece on a square.
- `Board.is_check(color)` and `Board.is_checkmate(color)` test either side.
- `Board.render()` returns the board as text.

The pieces live in `chessgame.pieces`, and `chessgame.pieces.make_figure`
builds a piece from its symbol.

`chessgame.pipe.GraphicsPipe` is the connection to the front end. Its methods
are `connect`, `send`, `receive` and `close`, and it can be used as a context
manager. `chessgame.cli.run_session(pipe, game)` runs the message exchange
over any object that has `send` and `receive`.

## Limits

The engine does not know castling or en passant. It has no graphical board of
its own: a front end has to supply the window and the move requests.