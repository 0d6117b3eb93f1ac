from __future__ import annotations

from typing import Optional

from reversi.config import get_verbose
from reversi.othello.board import BLACK, WHITE, Board, Coord
from reversi.othello.history import History, Pass, Placement
from reversi.othello.moves import LegalMoves, get_moves
from reversi.player.base import BasePlayer, Undo

COLOR_NAMES = {BLACK: "Black", WHITE: "White"}


class InvalidMove(Exception):
    pass


class Outcome:
    def __init__(self, black: int, white: int) -> None:
        self.black = black
        self.white = white

    def __repr__(self) -> str:
        return f"Outcome({self.black}, {self.white})"

    def get_winner(self) -> Optional[int]:
        if self.black > self.white:
            return BLACK
        if self.white > self.black:
            return WHITE
        return None

    def show(self) -> None:
        winner = self.get_winner()

        if winner is None:
            print("Draw!")
        else:
            print(f"{COLOR_NAMES[winner]} Win!")

        print(f"black: {self.black}")
        print(f"white: {self.white}")


class Game:
    def __init__(self, board: Optional[Board] = None) -> None:
        self.board = Board.start() if board is None else board
        self.history = History()
        self.verbose = get_verbose()

    def __repr__(self) -> str:
        return f"Game({self.board}, {self.history})"

    def turn(self) -> int:
        return self.history.turn()

    def get_moves(self) -> LegalMoves:
        return get_moves(self.board, self.turn())

    def get_board(self) -> Board:
        return self.board.copy()

    def is_game_end(self) -> bool:
        return self.history.ends_with_double_pass()

    def do_move(self, coord: Coord) -> Placement:
        color = self.turn()
        moves = self.get_moves()

        try:
            flipped = moves[coord]
        except KeyError as e:
            raise InvalidMove(f"Cannot place at {coord}") from e

        for flip in flipped:
            self.board.put(flip, color)
        self.board.put(coord, color)

        placement = Placement(coord, flipped)
        self.history.append(placement)

        if self.verbose:
            field = Board.coord_to_field(coord)
            print(f"{COLOR_NAMES[color]} plays {field}, flips {len(flipped)}")

        return placement

    def pass_move(self) -> None:
        if self.get_moves():
            raise InvalidMove("Cannot pass while moves are available")

        if self.verbose:
            print(f"{COLOR_NAMES[self.turn()]} passes")

        self.history.append(Pass())

    def undo(self) -> Optional[Placement]:
        placement = self.history.undo(self.board)

        if self.verbose and placement is not None:
            field = Board.coord_to_field(placement.coord)
            print(f"Undo {field}, {COLOR_NAMES[self.turn()]} to move")

        return placement

    def step(self, black: BasePlayer, white: BasePlayer) -> None:
        """Resolve one prompt of the active player, or pass when it has no moves."""
        assert not self.is_game_end()

        moves = self.get_moves()

        if not moves:
            self.pass_move()
            return

        color = self.turn()
        player = black if color == BLACK else white

        player.on_turn(self.get_board(), color, moves)
        action = player.get_action(moves)

        if isinstance(action, Undo):
            self.undo()
            return

        try:
            self.do_move(action.coord)
        except InvalidMove:
            player.on_invalid_move(action.coord)

    def play(self, black: BasePlayer, white: BasePlayer) -> Outcome:
        while not self.is_game_end():
            self.step(black, white)

        return self.get_outcome()

    def get_outcome(self) -> Outcome:
        return Outcome(self.board.count(BLACK), self.board.count(WHITE))
