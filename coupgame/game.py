"""Turn order and player registry for a game of Coup."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from coupgame.player import Player

MAX_PLAYERS = 6


class GameError(RuntimeError):
    """Raised when a game rule forbids an operation."""


class Game:
    """Tracks the players of one game, whose turn it is and the last arrest."""

    def __init__(self) -> None:
        self._turn_index = 0
        self._players: list[Player] = []
        self.last_arrest = ""

    def add_player(self, player: Player) -> None:
        """Register a player; a game holds at most six."""
        if len(self._players) >= MAX_PLAYERS:
            raise GameError("cannot add more then six players")
        self._players.append(player)

    def players(self) -> list[str]:
        """Names of the players still in the game, in seating order."""
        return [p.name for p in self._players if p.active]

    def all_players(self) -> tuple[Player, ...]:
        """Every registered player, active or not, in seating order."""
        return tuple(self._players)

    def turn(self) -> str:
        """Name of the player whose turn it is."""
        if not self._players:
            raise GameError("there is no players left")
        return self._players[self._turn_index].name

    def next_turn(self) -> None:
        """Move the turn to the next active player."""
        if not any(p.active for p in self._players):
            raise GameError("there is no players left")
        count = len(self._players)
        while True:
            self._turn_index = (self._turn_index + 1) % count
            if self._players[self._turn_index].active:
                break

    def back_turn(self) -> None:
        """Move the turn back to the previous seat."""
        if not self._players:
            raise GameError("there is no players left")
        self._turn_index = (self._turn_index - 1) % len(self._players)

    def winner(self) -> str:
        """Name of the only player left; raises while the game goes on."""
        active = [p for p in self._players if p.active]
        if len(active) > 1:
            raise GameError("there is no winner yet")
        if not active:
            raise GameError("All players are out of the game")
        return active[0].name