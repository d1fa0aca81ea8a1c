"""A scripted walk through three games that exercises every rule."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from contextlib import contextmanager

from coupgame.game import Game, GameError
from coupgame.roles import Baron, General, Governor, Judge, Merchant, Spy


@contextmanager
def _expect_failure() -> Iterator[None]:
    """Report a rule violation on stderr and carry on."""
    try:
        yield
    except GameError as exc:
        print(exc, file=sys.stderr)


def _show_coins(game: Game) -> None:
    for p in game.all_players():
        print(f"{p.name} {p.coins}")


def _show_coins_and_status(game: Game) -> None:
    for p in game.all_players():
        print(f"{p.name} {p.coins} {str(p.active).lower()}")


def _first_game() -> Game:
    game = Game()
    governor = Governor(game, "Moshe")
    spy = Spy(game, "Yossi")
    baron = Baron(game, "Meirav")
    general = General(game, "Reut")
    judge = Judge(game, "Gilad")

    for name in game.players():
        print(name)
    print(game.turn())

    governor.gather()
    spy.gather()
    baron.gather()
    general.gather()
    judge.gather()

    with _expect_failure():
        spy.gather()

    governor.gather()
    spy.tax()

    with _expect_failure():
        judge.undo(governor)

    print(governor.coins)
    print(spy.coins)

    governor.undo(spy)
    print(spy.coins)

    baron.tax()
    general.gather()
    judge.gather()

    governor.tax()
    spy.gather()
    baron.invest()
    general.gather()
    judge.gather()

    print(baron.coins)

    governor.tax()
    spy.gather()
    baron.gather()
    general.gather()
    judge.gather()

    print(f"the turn is: {game.turn()}")

    governor.tax()
    spy.gather()
    print(baron.coins)
    baron.coup(governor)

    print(f"the turn is: {game.turn()}")

    general.gather()
    judge.gather()

    for name in game.players():
        print(name)
    return game


def _second_game() -> Game:
    print("starting the second game\n")
    game = Game()
    governor = Governor(game, "Haniel")
    spy = Spy(game, "Mom")
    baron = Baron(game, "Dad")
    general = General(game, "Dagan")
    judge = Judge(game, "Hadar")
    merchant = Merchant(game, "Ron")

    for p in (governor, spy, baron, general, judge, merchant):
        p.gather()
    print("coins of the players after gathering")
    _show_coins(game)

    for p in (governor, spy, baron, general, judge, merchant):
        p.tax()
    _show_coins(game)

    governor.tax()
    spy.tax()
    baron.invest()
    general.tax()
    judge.tax()
    merchant.tax()
    _show_coins(game)

    governor.tax()
    spy.tax()
    spy.block_arrest(governor)

    baron.invest()
    baron.bribe()
    baron.gather()

    general.tax()
    judge.tax()
    merchant.tax()
    _show_coins(game)

    with _expect_failure():
        governor.arrest(baron)
    governor.coup(spy)

    with _expect_failure():
        spy.view_coins(governor)

    baron.arrest(governor)
    print(f"the turn:{game.turn()}")

    print(f"spy2 is active: {int(spy.active)}")
    general.cancel_coup(spy)
    print(f"is active: {int(spy.active)}")

    general.tax()
    spy.view_coins(governor)

    judge.tax()
    merchant.tax()
    _show_coins(game)

    governor.tax()
    print(f"the turn is: {game.turn()}")

    spy.gather()
    spy.bribe()

    judge.undo(spy)
    print(f"the turn is: {game.turn()}")

    baron.sanction(general)

    with _expect_failure():
        general.tax()
    with _expect_failure():
        general.gather()

    print(str(general.arrest_access).lower())
    general.arrest(judge)
    judge.tax()

    with _expect_failure():
        merchant.tax()
    merchant.coup(judge)
    _show_coins_and_status(game)

    governor.arrest(merchant)
    print(f"last arrest: {game.last_arrest}")

    with _expect_failure():
        spy.arrest(merchant)
    spy.tax()

    governor.undo(spy)
    baron.tax()
    general.tax()
    merchant.gather()
    _show_coins_and_status(game)

    governor.tax()
    spy.tax()
    baron.tax()
    general.coup(baron)
    merchant.tax()
    _show_coins_and_status(game)

    governor.coup(general)
    spy.tax()

    with _expect_failure():
        general.gather()
    merchant.coup(governor)
    _show_coins_and_status(game)

    spy.coup(merchant)
    print(f"the turn is: {game.turn()}")
    print(f"the winner is: {game.winner()}")
    return game


def _third_game() -> Game:
    print("starting the third game\n")
    game = Game()
    Governor(game, "Mor")
    with _expect_failure():
        Spy(game, "Mor")
    Spy(game, "Yahav")
    Baron(game, "Ido")
    Baron(game, "Meir")
    return game


def run_demo() -> tuple[Game, Game, Game]:
    """Play the three scripted games and return them."""
    return _first_game(), _second_game(), _third_game()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="coupgame-demo",
        description="Play three scripted games of Coup on the console.",
    )
    parser.parse_args(argv)
    run_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())