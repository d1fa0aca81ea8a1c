"""The six roles of Coup and the special abilities each one brings."""

from __future__ import annotations

from coupgame.game import Game, GameError
from coupgame.player import Player, Role


def _label(player: Player) -> str:
    return f"{player.name}({player.role.value})"


class Baron(Player):
    """A player who can invest three coins and get six back."""

    def __init__(self, game: Game, name: str) -> None:
        super().__init__(game, name, Role.BARON)

    def invest(self) -> None:
        """Trade three coins for six; uses up the turn."""
        if self.coins < 3:
            raise GameError("cannot invest with less then 3 coins")
        if self.game.turn() != self.name:
            raise GameError("Not baron's turn")
        self.add_coins(3)
        self.game.next_turn()
        self.last_action = "invest"
        print(f"{self.name} (Baron) traded its 3 coins and got 6 ")
        self.open_access()


class General(Player):
    """A player who can pay five coins to bring a couped player back."""

    def __init__(self, game: Game, name: str) -> None:
        super().__init__(game, name, Role.GENERAL)

    def cancel_coup(self, target: Player) -> None:
        """Return a couped player to the game for five coins."""
        if self.coins < 5:
            raise GameError("cannot cancel coup there is not enough coins")
        if target.active:
            raise GameError("cannot cancel coup on active player")
        target.active = True
        self.decrease_coins(5)
        print(f"{_label(self)} cancelled the coup on {_label(target)}")


class Governor(Player):
    """A player whose tax yields three coins and who can undo a tax."""

    def __init__(self, game: Game, name: str) -> None:
        super().__init__(game, name, Role.GOVERNOR)

    def tax(self) -> None:
        """Take three coins from the bank."""
        if not self.tax_access:
            raise GameError("no access for tax operation")
        self.add_coins(3)
        print(f"{self.name} (Governor) took three coins by using tax operation")
        self.game.next_turn()
        self.last_action = "tax"
        self.open_access()

    def undo(self, target: Player) -> None:
        """Take back the two coins another player gained by tax."""
        if not target.active:
            raise GameError("the player is not active anymore")
        if target.last_action != "tax":
            raise GameError("the last action of  this player is not tax")
        if target.coins < 2:
            raise GameError("cannot undo tax on a player with less than 2 coins")
        if target.status == "undo":
            raise GameError(
                "cannot undo tax on a player who already has undo status"
            )
        target.decrease_coins(2)
        print(f"{self.name}(Governor) undo tax on {target.name}")
        target.status = "undo"


class Judge(Player):
    """A player who can cancel another player's bribe."""

    def __init__(self, game: Game, name: str) -> None:
        super().__init__(game, name, Role.JUDGE)

    def undo(self, target: Player) -> None:
        """Cancel a bribe; the extra turn it bought passes on."""
        if target.last_action == "cancelled":
            raise GameError("Judge already cancelled this operation")
        if target.last_action == "bribe":
            target.last_action = "cancelled"
            self.game.next_turn()
            print(f"{_label(self)} cancelled {target.name}'s bribe operation")
            return
        if target.status == "coup":
            raise GameError("the player is out of the game")
        raise GameError(f"Judge cannot undo {target.last_action} operation")


class Merchant(Player):
    """A player who earns a bonus coin when starting a turn with three or more."""

    def __init__(self, game: Game, name: str) -> None:
        super().__init__(game, name, Role.MERCHANT)

    def merchant_bonus(self) -> None:
        """Add one coin when holding at least three."""
        if self.coins >= 3:
            self.add_coins(1)
            print(f"{self.name} (Merchant) got a bonus coin at the start of the turn")


class Spy(Player):
    """A player who can see coins and block arrests."""

    def __init__(self, game: Game, name: str) -> None:
        super().__init__(game, name, Role.SPY)
        self.seen_coins: int | None = None

    def block_arrest(self, target: Player) -> None:
        """Stop another player from arresting until that player acts."""
        if not self.active:
            raise GameError("cannot block arrest with no active player")
        if not target.active:
            raise GameError("the player is not active")
        print(f"{self.name}(spy) has blocked {target.name}'s arrest")
        target.arrest_access = False

    def view_coins(self, target: Player) -> int:
        """Look at another player's coins; does not use up the turn."""
        if not self.active:
            raise GameError("cannot view coins with no active player")
        if not target.active:
            raise GameError("this player is not active so far")
        self.seen_coins = target.coins
        print(f"{self.name} has view {target.name}'s coins: {self.seen_coins}")
        return self.seen_coins