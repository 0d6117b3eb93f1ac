from __future__ import annotations

from typing import Iterable

from reversi.config import get_glyphs

BLACK = -1
WHITE = 1
EMPTY = 0

BOARD_SIZE = 8

# (x, y), both in range(BOARD_SIZE)
Coord = tuple[int, int]


def opponent(color: int) -> int:
    assert color in [BLACK, WHITE, EMPTY]
    return -color


def is_on_board(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


class Board:
    """
    Board stores the color of every square, but not the color of the player to move.
    The player to move is derived from the game history instead.
    """

    def __init__(self, squares: list[list[int]]) -> None:
        assert len(squares) == BOARD_SIZE
        assert all(len(row) == BOARD_SIZE for row in squares)

        # Indexed as squares[y][x], rows are never shared.
        self.squares = [list(row) for row in squares]

    @classmethod
    def empty(cls) -> Board:
        return Board([[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)])

    @classmethod
    def start(cls) -> Board:
        mid = BOARD_SIZE // 2
        return (
            Board.empty()
            .put((mid - 1, mid - 1), WHITE)
            .put((mid, mid), WHITE)
            .put((mid - 1, mid), BLACK)
            .put((mid, mid - 1), BLACK)
        )

    @classmethod
    def from_squares(cls, squares: list[int]) -> Board:
        assert len(squares) == BOARD_SIZE * BOARD_SIZE
        assert all(square in [BLACK, WHITE, EMPTY] for square in squares)

        rows = [
            squares[y * BOARD_SIZE : (y + 1) * BOARD_SIZE] for y in range(BOARD_SIZE)
        ]
        return Board(rows)

    def copy(self) -> Board:
        return Board(self.squares)

    def __repr__(self) -> str:
        return f"Board({self.squares})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            raise TypeError(f"Cannot compare Board with {type(other)}")

        return self.squares == other.squares

    def put(self, coord: Coord, color: int) -> Board:
        x, y = coord
        assert is_on_board(x, y)
        assert color in [BLACK, WHITE, EMPTY]

        self.squares[y][x] = color
        return self

    def get_square(self, coord: Coord) -> int:
        x, y = coord
        assert is_on_board(x, y)
        return self.squares[y][x]

    def get_squares(self, coords: Iterable[Coord]) -> list[int]:
        return [self.get_square(coord) for coord in coords]

    def iter_coords(self) -> Iterable[Coord]:
        # Row-major, a1 b1 ... h1 a2 ...
        for y in range(BOARD_SIZE):
            for x in range(BOARD_SIZE):
                yield (x, y)

    def ray_to_edge(self, origin: Coord, direction: tuple[int, int]) -> list[Coord]:
        dx, dy = direction
        assert (dx, dy) != (0, 0)

        x, y = origin
        ray: list[Coord] = []

        while True:
            x, y = x + dx, y + dy
            if not is_on_board(x, y):
                break
            ray.append((x, y))

        return ray

    def count(self, color: int) -> int:
        assert color in [WHITE, BLACK]
        return sum(row.count(color) for row in self.squares)

    def count_discs(self) -> int:
        return self.count(BLACK) + self.count(WHITE)

    def count_empties(self) -> int:
        return BOARD_SIZE * BOARD_SIZE - self.count_discs()

    def show(self, moves: Iterable[Coord] = ()) -> None:
        glyphs = get_glyphs()
        move_set = set(moves)

        print("  " + " ".join("abcdefgh"))
        for y in range(BOARD_SIZE):
            line = ""
            for x in range(BOARD_SIZE):
                square = self.squares[y][x]

                if square == EMPTY and (x, y) in move_set:
                    line += " ·"
                else:
                    line += " " + glyphs[square]
            print(f"{y + 1}{line}")

    @classmethod
    def coord_to_field(cls, coord: Coord) -> str:
        x, y = coord
        if not is_on_board(x, y):
            raise ValueError(f"Invalid coordinate {coord}")
        return "abcdefgh"[x] + "12345678"[y]

    @classmethod
    def coords_to_fields(cls, coords: Iterable[Coord]) -> str:
        return " ".join(cls.coord_to_field(coord) for coord in coords)

    @classmethod
    def field_to_coord(cls, field: str) -> Coord:
        if len(field) != 2:
            raise ValueError(f'Invalid field length "{len(field)}"')

        field = field.lower()

        if not ("a" <= field[0] <= "h" and "1" <= field[1] <= "8"):
            raise ValueError(f'Invalid field "{field}"')

        x = ord(field[0]) - ord("a")
        y = ord(field[1]) - ord("1")
        return (x, y)
