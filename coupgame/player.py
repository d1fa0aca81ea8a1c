"""The common player of a Coup game and the actions every role shares."""

from __future__ import annotations

from enum import Enum

from coupgame.game import Game, GameError


class Role(str, Enum):
    """The roles a player may hold."""

    GOVERNOR = "Governor"
    SPY = "Spy"
    BARON = "Baron"
    GENERAL = "General"
    JUDGE = "Judge"
    MERCHANT = "Merchant"


# Coins a sanctioned player receives back, by the target's role.
_SANCTION_COMPENSATION: dict[Role, int] = {Role.BARON: 1}

# A sanction costs the base price plus a surcharge that depends on the target.
_SANCTION_BASE_COST = 3
_SANCTION_SURCHARGE: dict[Role, int] = {Role.JUDGE: 1}


class Player:
    """A seat in the game: coins, status and the basic actions."""

    def __init__(self, game: Game, name: str, role: Role | str) -> None:
        if any(p.name == name for p in game.all_players()):
            raise GameError("This name is already taken- please choose another one")
        if not name:
            raise GameError("the name of the player cannot be empty")
        if not role:
            raise GameError("the role of the player cannot be empty")
        try:
            role = Role(role)
        except ValueError:
            raise GameError("the role of the player is not valid") from None

        self.game = game
        self._name = name
        self._role = role
        self._coins = 0
        self.active = True
        self.gather_access = True
        self.tax_access = True
        self.coup_access = True
        self.arrest_access = True
        self.last_action = ""
        self.status = ""
        game.add_player(self)

    @property
    def name(self) -> str:
        return self._name

    @property
    def role(self) -> Role:
        return self._role

    @property
    def coins(self) -> int:
        return self._coins

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r}, coins={self._coins})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def add_coins(self, n: int) -> None:
        self._coins += n

    def decrease_coins(self, n: int) -> None:
        if n > self._coins:
            raise GameError("the player dosen't have enough coins")
        self._coins -= n

    def _label(self) -> str:
        return f"{self._name}({self._role.value})"

    def gather(self) -> None:
        """Take one coin from the bank."""
        self.ensure_turn()
        self.check_coins()
        if not self.gather_access:
            raise GameError("no access for gather operation")
        self.merchant_bonus()
        self._coins += 1
        self.last_action = "gather"
        self.game.next_turn()
        print(f"{self._label()} took one coin by using gather operation")
        self.open_access()

    def tax(self) -> None:
        """Take two coins from the bank."""
        self.ensure_turn()
        self.check_coins()
        if not self.tax_access:
            raise GameError("no access for tax operation")
        self.merchant_bonus()
        self._coins += 2
        self.last_action = "tax"
        self.game.next_turn()
        print(f"{self._label()} took two coins by using tax operation")
        self.open_access()

    def bribe(self) -> None:
        """Pay four coins to take the turn back for another action."""
        if not self.active:
            raise GameError("cannot perform bribe- the player is not active")
        self.check_coins()
        self.merchant_bonus()
        if self._coins < 4:
            raise GameError("the player dosen't have enough coins for bribe operation")
        if self.game.turn() == self._name:
            raise GameError("this is already the player's turn")
        self._coins -= 4
        self.last_action = "bribe"
        self.game.back_turn()
        print(f"{self._label()} do a bribe operation ")

    def arrest(self, target: Player) -> None:
        """Take a coin from another player."""
        self.ensure_turn()
        self.check_coins()
        if not self.arrest_access:
            raise GameError("no access for arrest operation")
        if not target.active:
            raise GameError("the target player is already out of the game")
        if target.coins < 1:
            raise GameError(
                "the target player dosen't have enough coins, please choose another player"
            )
        if self.game.last_arrest == target.name:
            raise GameError("cannot arrest the same player two times in a row")

        self.merchant_bonus()
        if target.role is Role.MERCHANT:
            target.decrease_coins(2)
        elif target.role is Role.GENERAL:
            self._coins += 1
        else:
            target.decrease_coins(1)
            self._coins += 1
        self.last_action = "arrest"
        target.status = "arrest"
        self.game.last_arrest = target.name
        print(f"{self._label()} performed an arrest operation against {target._label()}")
        self.game.next_turn()
        self.open_access()

    def sanction(self, target: Player) -> None:
        """Pay to block another player's gather and tax."""
        self.ensure_turn()
        self.check_coins()
        self.merchant_bonus()
        if self._coins < 3:
            raise GameError(
                "the player dosen't have enough coins to perform sanction operation"
            )
        if not target.active:
            raise GameError("the target player is already out of the game")

        target.gather_access = False
        target.tax_access = False
        target.add_coins(self.sanction_compensation(target))
        self._coins -= self.sanction_cost(target)

        self.last_action = "sanction"
        target.status = "sanction"
        self.game.next_turn()
        print(f"{self._label()} performed a sanction operation against {target._label()}")
        self.open_access()

    def coup(self, target: Player) -> None:
        """Pay seven coins to put another player out of the game."""
        self.ensure_turn()
        if not self.coup_access:
            raise GameError("no access for coup operation")
        if not target.active:
            raise GameError("the player is already out of the game")
        self.merchant_bonus()
        if self._coins < 7:
            raise GameError("the player doesn't have enough coins for a coup operation")

        self._coins -= 7
        target.active = False
        self.last_action = "coup"
        target.status = "coup"
        self.game.next_turn()
        print(f"{self._label()} performed a coup against {target._label()}")
        self.open_access()

    def merchant_bonus(self) -> None:
        """Start-of-turn bonus; only a Merchant receives one."""

    def undo(self, target: Player) -> None:
        """Undo another player's action; this role has no such ability."""
        print("this role diden't have the ability to undo", end="")

    def sanction_compensation(self, target: Player) -> int:
        """Coins a sanctioned target receives, looked up by the target's role."""
        return _SANCTION_COMPENSATION.get(target.role, 0)

    def sanction_cost(self, target: Player) -> int:
        """Coins a sanction costs: the base price plus the target's surcharge."""
        return _SANCTION_BASE_COST + _SANCTION_SURCHARGE.get(target.role, 0)

    def check_coins(self) -> None:
        """A player holding ten or more coins must coup."""
        if self._coins >= 10:
            raise GameError("You are must make a coup operation")

    def open_access(self) -> None:
        self.arrest_access = True
        self.tax_access = True
        self.gather_access = True

    def ensure_turn(self) -> None:
        """Raise unless it is this player's turn and the player is active."""
        if self.game.turn() != self._name:
            raise GameError(f"Not {self._role.value.lower()}'s turn")
        if not self.active:
            raise GameError("Cannot make operation-the player is not active")