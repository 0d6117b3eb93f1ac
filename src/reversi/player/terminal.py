from __future__ import annotations

from typing import Callable, Optional

from reversi.config import get_glyphs, get_show_moves
from reversi.othello.board import Board, Coord, is_on_board
from reversi.othello.moves import LegalMoves
from reversi.player.base import Action, BasePlayer, Put, Undo

PROMPT = "Please enter a field like d3, x and y separated by a space, or 'undo':"


def parse_action(text: str) -> Action:
    words = text.split()

    if not words:
        raise ValueError("No input")

    if len(words) == 1:
        if words[0].lower() == "undo":
            return Undo()
        return Put(Board.field_to_coord(words[0]))

    if len(words) == 2:
        try:
            x, y = int(words[0]), int(words[1])
        except ValueError as e:
            raise ValueError(f'Invalid coordinates "{text.strip()}"') from e

        if not is_on_board(x, y):
            raise ValueError(f"Coordinates out of range: {x} {y}")
        return Put((x, y))

    raise ValueError(f'Could not parse "{text.strip()}"')


class TerminalPlayer(BasePlayer):
    def __init__(
        self,
        show_moves: Optional[bool] = None,
        read: Optional[Callable[[str], str]] = None,
    ) -> None:
        self.show_moves = get_show_moves() if show_moves is None else show_moves
        self.read = read or input

    def on_turn(self, board: Board, color: int, moves: LegalMoves) -> None:
        board.show(moves if self.show_moves else ())
        print(f"{get_glyphs()[color]}'s turn.")

        if self.show_moves:
            print("Moves: " + Board.coords_to_fields(moves))

    def get_action(self, moves: LegalMoves) -> Action:
        while True:
            print(PROMPT)
            try:
                return parse_action(self.read(""))
            except ValueError as e:
                print(e)

    def on_invalid_move(self, coord: Coord) -> None:
        print("Can't put there.")
