import typer

from reversi.config import get_show_moves
from reversi.othello.game import Game
from reversi.player.terminal import TerminalPlayer


def play() -> None:
    def command(
        show_moves: bool = typer.Option(get_show_moves(), "--show-moves/--hide-moves"),
        verbose: bool = typer.Option(False, "-v"),
    ) -> None:
        game = Game()
        game.verbose = game.verbose or verbose

        black = TerminalPlayer(show_moves)
        white = TerminalPlayer(show_moves)

        outcome = game.play(black, white)

        game.get_board().show()
        outcome.show()

    typer.run(command)
