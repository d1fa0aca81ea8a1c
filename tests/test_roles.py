import pytest

from coupgame.game import Game, GameError
from coupgame.roles import Baron, General, Governor, Judge, Merchant, Spy


def _table():
    game = Game()
    return (
        game,
        Governor(game, "Haniel"),
        Spy(game, "Mom"),
        Baron(game, "Dad"),
        General(game, "Dagan"),
        Judge(game, "Hadar"),
        Merchant(game, "Ron"),
    )


def assert_fails(action, message):
    with pytest.raises(GameError) as exc:
        action()
    assert str(exc.value) == message


def test_game_initialization_and_irregular_operations():
    game, governor, spy, baron, general, judge, merchant = _table()
    assert len(game.players()) == 6

    assert_fails(spy.tax, "Not spy's turn")
    governor.tax()
    assert game.turn() == "Mom"

    spy.gather()
    baron.gather()
    general.gather()
    judge.gather()
    merchant.gather()
    assert governor.coins == 3

    assert_fails(governor.bribe, "the player dosen't have enough coins for bribe operation")

    for p in (governor, spy, baron, general, judge, merchant):
        p.tax()

    governor.tax()
    spy.tax()
    baron.invest()
    general.tax()
    judge.tax()
    merchant.tax()

    governor.coup(merchant)
    assert_fails(lambda: spy.arrest(merchant), "the target player is already out of the game")

    spy.block_arrest(baron)
    spy.tax()
    assert_fails(lambda: baron.arrest(merchant), "no access for arrest operation")

    baron.sanction(general)
    assert_fails(general.gather, "no access for gather operation")
    assert_fails(general.tax, "no access for tax operation")

    general.arrest(governor)
    assert governor.coins == 1

    assert_fails(
        lambda: judge.arrest(governor), "cannot arrest the same player two times in a row"
    )
    judge.gather()

    assert_fails(merchant.gather, "Not merchant's turn")

    governor.tax()
    spy.tax()
    baron.invest()

    assert_fails(lambda: general.cancel_coup(spy), "cannot cancel coup on active player")

    general.cancel_coup(merchant)
    assert merchant.active is True
    assert merchant.coins == 6

    general.gather()
    judge.tax()
    merchant.gather()

    governor.arrest(general)
    spy.tax()
    baron.gather()
    general.tax()
    judge.tax()
    merchant.gather()

    assert governor.coins == 5
    assert spy.coins == 11
    assert baron.coins == 7
    assert general.coins == 4
    assert judge.coins == 10
    assert merchant.coins == 10

    governor.gather()
    assert_fails(spy.gather, "You are must make a coup operation")
    assert_fails(lambda: spy.arrest(baron), "You are must make a coup operation")

    spy.coup(baron)
    assert game.turn() == "Dagan"
    assert baron.active is False

    general.tax()
    judge.coup(spy)
    assert spy.active is False

    assert_fails(lambda: merchant.coup(spy), "the player is already out of the game")

    merchant.coup(governor)
    assert merchant.coins == 4
    assert governor.active is False
    assert game.turn() == "Dagan"

    general.cancel_coup(baron)
    assert baron.active is True
    assert baron.coins == 7

    assert_fails(lambda: spy.view_coins(baron), "cannot view coins with no active player")
    assert_fails(
        lambda: spy.block_arrest(baron), "cannot block arrest with no active player"
    )
    assert game.turn() == "Dagan"

    general.tax()
    judge.tax()
    merchant.tax()

    baron.tax()
    general.tax()
    judge.tax()
    merchant.tax()

    assert baron.coins == 9
    assert general.coins == 5
    assert judge.coins == 7
    assert merchant.coins == 10
    assert governor.active is False
    assert spy.active is False

    baron.coup(general)
    judge.coup(baron)

    assert_fails(game.winner, "there is no winner yet")

    merchant.coup(judge)
    assert [p.active for p in (governor, spy, baron, general, judge, merchant)] == [
        False,
        False,
        False,
        False,
        False,
        True,
    ]
    assert game.winner() == "Ron"


def test_governor_operations():
    game, governor, spy, baron, general, judge, merchant = _table()
    governor.tax()
    spy.tax()
    baron.gather()
    general.gather()
    judge.gather()
    merchant.tax()

    assert game.turn() == "Haniel"
    assert governor.coins == 3

    governor.arrest(merchant)
    assert_fails(
        lambda: governor.undo(merchant),
        "cannot undo tax on a player with less than 2 coins",
    )

    spy.tax()
    baron.tax()
    general.gather()
    judge.tax()
    merchant.tax()

    governor.undo(spy)
    assert spy.coins == 2
    assert spy.status == "undo"

    assert_fails(
        lambda: governor.undo(spy),
        "cannot undo tax on a player who already has undo status",
    )


def test_spy_operations(capsys):
    game, governor, spy, baron, general, judge, merchant = _table()
    for p in (governor, spy, baron, general, judge):
        p.gather()
    merchant.tax()

    capsys.readouterr()
    assert game.turn() == "Haniel"
    assert spy.view_coins(merchant) == 2
    assert game.turn() == "Haniel"
    assert capsys.readouterr().out == "Mom has view Ron's coins: 2\n"

    governor.tax()
    assert game.turn() == "Mom"
    spy.block_arrest(baron)
    assert game.turn() == "Mom"

    spy.tax()
    assert_fails(lambda: baron.arrest(merchant), "no access for arrest operation")


def test_baron_operations(capsys):
    game, governor, spy, baron, general, judge, merchant = _table()
    governor.gather()
    spy.gather()
    baron.tax()
    general.gather()
    judge.gather()
    merchant.tax()

    assert_fails(baron.invest, "cannot invest with less then 3 coins")

    governor.gather()
    spy.gather()
    baron.tax()
    general.gather()
    judge.gather()
    merchant.tax()

    governor.gather()
    spy.gather()

    capsys.readouterr()
    baron.invest()
    assert capsys.readouterr().out == "Dad (Baron) traded its 3 coins and got 6 \n"

    general.gather()
    judge.gather()

    merchant.sanction(baron)
    assert baron.coins == 8


def test_general_operations():
    game, governor, spy, baron, general, judge, merchant = _table()
    governor.tax()
    spy.tax()
    baron.tax()
    general.gather()
    judge.tax()
    merchant.tax()

    governor.tax()
    spy.tax()
    baron.tax()
    general.gather()
    judge.tax()
    merchant.tax()

    for p in (governor, spy, baron, general, judge, merchant):
        p.tax()

    governor.coup(spy)
    baron.gather()
    assert_fails(
        lambda: general.cancel_coup(spy), "cannot cancel coup there is not enough coins"
    )

    general.tax()
    judge.arrest(general)
    assert general.coins == 6

    merchant.tax()
    governor.tax()
    baron.gather()

    assert_fails(lambda: general.cancel_coup(baron), "cannot cancel coup on active player")

    general.cancel_coup(spy)
    assert spy.active is True


def test_general_cancels_coup_on_himself():
    game, governor, spy, baron, general, judge, merchant = _table()
    for _ in range(3):
        for p in (governor, spy, baron, general, judge, merchant):
            p.tax()

    governor.coup(general)
    spy.gather()
    baron.gather()
    general.cancel_coup(general)

    assert general.active is True
    assert general.coins == 1


def test_judge_operations():
    game, governor, spy, baron, general, judge, merchant = _table()
    for _ in range(2):
        governor.gather()
        spy.gather()
        baron.tax()
        general.gather()
        judge.gather()
        merchant.tax()
    for p in (governor, spy, baron, general, judge, merchant):
        p.tax()

    governor.gather()
    governor.bribe()
    assert game.turn() == "Haniel"
    judge.undo(governor)
    assert game.turn() == "Mom"
    assert governor.coins == 2

    assert_fails(spy.bribe, "this is already the player's turn")

    spy.gather()
    assert_fails(lambda: judge.undo(spy), "Judge cannot undo gather operation")
    assert_fails(lambda: judge.undo(governor), "Judge already cancelled this operation")


def test_merchant_operations():
    game = Game()
    baron = Baron(game, "Dad")
    general = General(game, "Dagan")
    judge = Judge(game, "Hadar")
    merchant = Merchant(game, "Ron")

    baron.tax()
    general.gather()
    judge.gather()
    merchant.gather()
    assert merchant.coins == 1

    baron.tax()
    general.gather()
    judge.gather()
    merchant.tax()
    assert baron.coins == 4

    baron.tax()
    general.gather()
    judge.gather()
    merchant.gather()
    assert merchant.coins == 5

    baron.arrest(merchant)
    assert baron.coins == 6
    assert merchant.coins == 3


def test_special_cases():
    game, governor, spy, baron, general, judge, merchant = _table()
    assert_fails(
        lambda: governor.arrest(merchant),
        "the target player dosen't have enough coins, please choose another player",
    )

    for _ in range(2):
        for p in (governor, spy, baron, general, judge, merchant):
            p.tax()

    governor.tax()
    governor.bribe()
    assert game.turn() == "Haniel"

    assert_fails(governor.bribe, "this is already the player's turn")

    for p in (governor, spy, baron, general, judge, merchant):
        p.tax()

    governor.coup(baron)

    assert_fails(lambda: spy.arrest(baron), "the target player is already out of the game")
    assert_fails(lambda: spy.sanction(baron), "the target player is already out of the game")
    assert_fails(lambda: spy.coup(baron), "the player is already out of the game")
    assert_fails(lambda: spy.block_arrest(baron), "the player is not active")
    assert_fails(lambda: spy.view_coins(baron), "this player is not active so far")

    spy.gather()
    general.gather()

    assert_fails(lambda: judge.undo(baron), "the player is out of the game")

    judge.gather()
    merchant.gather()

    assert_fails(lambda: governor.undo(baron), "the player is not active anymore")


def test_operations_with_no_coins():
    game, governor, spy, baron, general, judge, merchant = _table()
    assert_fails(governor.bribe, "the player dosen't have enough coins for bribe operation")
    assert_fails(
        lambda: governor.sanction(spy),
        "the player dosen't have enough coins to perform sanction operation",
    )
    assert_fails(
        lambda: governor.coup(spy),
        "the player doesn't have enough coins for a coup operation",
    )

    governor.gather()
    spy.gather()
    baron.gather()

    assert_fails(
        lambda: general.cancel_coup(spy), "cannot cancel coup there is not enough coins"
    )


def test_operations_out_of_turn_and_other_cases():
    game, governor, spy, baron, general, judge, merchant = _table()
    assert_fails(spy.gather, "Not spy's turn")
    assert_fails(spy.tax, "Not spy's turn")
    assert_fails(lambda: spy.arrest(baron), "Not spy's turn")

    for _ in range(3):
        for p in (governor, spy, baron, general, judge, merchant):
            p.tax()

    assert_fails(lambda: baron.sanction(general), "Not baron's turn")
    assert_fails(lambda: merchant.coup(judge), "Not merchant's turn")

    governor.gather()
    assert_fails(baron.invest, "Not baron's turn")

    spy.tax()
    baron.invest()

    assert_fails(lambda: judge.undo(baron), "Judge cannot undo invest operation")
    assert_fails(lambda: governor.undo(baron), "the last action of  this player is not tax")

    general.gather()
    judge.gather()
    merchant.coup(general)
    governor.coup(merchant)
    spy.tax()
    baron.gather()
    general.cancel_coup(general)

    assert general.active is True
    assert general.coins == 2

    judge.coup(general)
    assert general.active is False

    governor.gather()
    spy.coup(judge)
    baron.coup(governor)

    assert_fails(
        lambda: general.cancel_coup(general),
        "cannot cancel coup there is not enough coins",
    )


def test_two_players_with_same_name():
    game = Game()
    Governor(game, "Haniel")
    assert_fails(
        lambda: Spy(game, "Haniel"),
        "This name is already taken- please choose another one",
    )
    assert game.players() == ["Haniel"]


def test_operate_when_blocked():
    game, governor, spy, baron, general, judge, merchant = _table()
    for _ in range(2):
        for p in (governor, spy, baron, general, judge, merchant):
            p.tax()

    governor.tax()
    spy.block_arrest(baron)
    spy.gather()

    assert_fails(lambda: baron.arrest(merchant), "no access for arrest operation")

    baron.sanction(general)
    assert_fails(general.gather, "no access for gather operation")
    assert_fails(general.tax, "no access for tax operation")

    general.arrest(governor)
    general.bribe()
    assert game.turn() == "Dagan"

    judge.undo(general)
    assert game.turn() == "Hadar"
    assert general.coins == 1


def test_roles_are_assigned_by_class():
    game, governor, spy, baron, general, judge, merchant = _table()
    assert [p.role.value for p in game.all_players()] == [
        "Governor",
        "Spy",
        "Baron",
        "General",
        "Judge",
        "Merchant",
    ]