from __future__ import annotations

from reversi.othello.board import EMPTY, Board, Coord, opponent

# Counter-clockwise from east in steps of 45 degrees.
DIRECTIONS = [
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
]

# Maps every legal move to the discs it flips, in row-major order of the moves.
LegalMoves = dict[Coord, list[Coord]]


def count_flippable_run(color: int, cells: list[int]) -> int:
    """
    Count the opponent discs directly next to the mover along one ray.
    They only flip when a disc of the mover closes the run.
    """
    target = opponent(color)

    run = 0
    while run < len(cells) and cells[run] == target:
        run += 1

    if run < len(cells) and cells[run] == color:
        return run
    return 0


def get_flippable_coords(board: Board, color: int, origin: Coord) -> list[Coord]:
    flippable: list[Coord] = []

    for direction in DIRECTIONS:
        ray = board.ray_to_edge(origin, direction)
        run = count_flippable_run(color, board.get_squares(ray))
        flippable += ray[:run]

    return flippable


def get_moves(board: Board, color: int) -> LegalMoves:
    moves: LegalMoves = {}

    for coord in board.iter_coords():
        if board.get_square(coord) != EMPTY:
            continue

        flippable = get_flippable_coords(board, color, coord)
        if flippable:
            moves[coord] = flippable

    return moves
