from __future__ import annotations

from typing import Optional, Union

from reversi.othello.board import BLACK, EMPTY, WHITE, Board, Coord, opponent


class Placement:
    def __init__(self, coord: Coord, flipped: list[Coord]) -> None:
        self.coord = coord
        self.flipped = tuple(flipped)

    def __repr__(self) -> str:
        return f"Placement({self.coord}, {list(self.flipped)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Placement):
            return False
        return (self.coord, self.flipped) == (other.coord, other.flipped)


class Pass:
    def __repr__(self) -> str:
        return "Pass()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Pass)


MoveRecord = Union[Placement, Pass]


class History:
    """
    Append-only log of the moves of one game, passes included.
    Black always moves first, so the length of the log decides who is to move.
    """

    def __init__(self) -> None:
        self.records: list[MoveRecord] = []

    def __len__(self) -> int:
        return len(self.records)

    def __repr__(self) -> str:
        return f"History({self.records})"

    def turn(self) -> int:
        if len(self.records) % 2 == 0:
            return BLACK
        return WHITE

    def last(self) -> Optional[MoveRecord]:
        if not self.records:
            return None
        return self.records[-1]

    def append(self, record: MoveRecord) -> None:
        self.records.append(record)

    def ends_with_double_pass(self) -> bool:
        return len(self.records) >= 2 and all(
            isinstance(record, Pass) for record in self.records[-2:]
        )

    def undo(self, board: Board) -> Optional[Placement]:
        """
        Pop trailing passes and the last placement, then restore the board as it
        was before that placement. Returns the undone placement, or None if the
        history held no placement.
        """
        while self.records:
            record = self.records.pop()

            if isinstance(record, Pass):
                continue

            # After popping, it is the turn of whoever made this placement again.
            color = self.turn()

            for coord in record.flipped:
                board.put(coord, opponent(color))
            board.put(record.coord, EMPTY)
            return record

        return None
