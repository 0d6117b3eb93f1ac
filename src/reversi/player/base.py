from __future__ import annotations

from typing import Union

from reversi.othello.board import Board, Coord
from reversi.othello.moves import LegalMoves


class Put:
    def __init__(self, coord: Coord) -> None:
        self.coord = coord

    def __repr__(self) -> str:
        return f"Put({self.coord})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Put) and self.coord == other.coord


class Undo:
    def __repr__(self) -> str:
        return "Undo()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Undo)


Action = Union[Put, Undo]


class BasePlayer:
    def on_turn(self, board: Board, color: int, moves: LegalMoves) -> None:
        pass

    def get_action(self, moves: LegalMoves) -> Action:
        raise NotImplementedError

    def on_invalid_move(self, coord: Coord) -> None:
        pass
