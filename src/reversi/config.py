import os
from dotenv import load_dotenv

load_dotenv()


def get_verbose() -> bool:
    return os.getenv("REVERSI_VERBOSE", "0") != "0"


def get_show_moves() -> bool:
    return os.getenv("REVERSI_SHOW_MOVES", "1") != "0"


def get_glyphs() -> dict[int, str]:
    # Keys match the BLACK, WHITE and EMPTY constants of the board module.
    return {
        -1: os.getenv("REVERSI_BLACK_GLYPH", "●"),
        1: os.getenv("REVERSI_WHITE_GLYPH", "○"),
        0: os.getenv("REVERSI_EMPTY_GLYPH", "."),
    }
