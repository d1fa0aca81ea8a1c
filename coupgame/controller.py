"""Game flow behind the graphical table: seating players, actions and targets."""

from __future__ import annotations

import random
from enum import Enum
from typing import Protocol, Sequence, TypeVar

from coupgame.game import MAX_PLAYERS, Game, GameError
from coupgame.player import Player, Role
from coupgame.roles import Baron, General, Governor, Judge, Merchant, Spy

_T = TypeVar("_T")

BASIC_ACTIONS: tuple[str, ...] = ("gather", "tax", "bribe", "arrest", "sanction", "coup")

_SPECIAL_ACTIONS: dict[Role, tuple[str, ...]] = {
    Role.GOVERNOR: ("UNDO",),
    Role.SPY: ("view coins", "block arrest"),
    Role.BARON: ("INVEST",),
    Role.GENERAL: ("cancel coup",),
    Role.JUDGE: ("UNDO",),
    Role.MERCHANT: (),
}

_ROLE_CLASSES: dict[Role, type[Player]] = {
    Role.GOVERNOR: Governor,
    Role.SPY: Spy,
    Role.BARON: Baron,
    Role.GENERAL: General,
    Role.JUDGE: Judge,
    Role.MERCHANT: Merchant,
}


class _Chooser(Protocol):
    def choice(self, seq: Sequence[_T]) -> _T: ...


class ActionState(Enum):
    """What the table is waiting for after an action button was pressed."""

    NONE = "none"
    SELECTING_TARGET_FOR_ARREST = "arrest"
    SELECTING_TARGET_FOR_SANCTION = "sanction"
    SELECTING_TARGET_FOR_COUP = "coup"
    SELECTING_TARGET_FOR_CANCEL_COUP = "cancel coup"
    SELECTING_TARGET_FOR_UNDO = "undo"
    SELECTING_TARGET_FOR_BLOCK_ARREST = "block arrest"
    SELECTING_TARGET_FOR_VIEW_COINS = "view coins"


_TARGETED: dict[str, ActionState] = {
    "arrest": ActionState.SELECTING_TARGET_FOR_ARREST,
    "sanction": ActionState.SELECTING_TARGET_FOR_SANCTION,
    "coup": ActionState.SELECTING_TARGET_FOR_COUP,
    "cancel coup": ActionState.SELECTING_TARGET_FOR_CANCEL_COUP,
    "UNDO": ActionState.SELECTING_TARGET_FOR_UNDO,
    "block arrest": ActionState.SELECTING_TARGET_FOR_BLOCK_ARREST,
    "view coins": ActionState.SELECTING_TARGET_FOR_VIEW_COINS,
}

_UNTARGETED_LABELS: dict[str, str] = {
    "gather": "Gather",
    "tax": "Tax",
    "bribe": "Bribe",
}


def create_player(game: Game, name: str, role: Role | str) -> Player:
    """Seat a new player of the given role in the game."""
    try:
        role = Role(role)
    except ValueError:
        raise GameError("the role of the player is not valid") from None
    return _ROLE_CLASSES[role](game, name)


def actions_for(role: Role | str) -> tuple[str, ...]:
    """The action buttons shown for a player of the given role."""
    return BASIC_ACTIONS + _SPECIAL_ACTIONS[Role(role)]


class GameSession:
    """One game at the table: players are seated with random roles, then play."""

    def __init__(self, rng: _Chooser | None = None) -> None:
        self.rng: _Chooser = rng if rng is not None else random.Random()
        self.game = Game()
        self.started = False
        self.error_message = ""
        self.action_state = ActionState.NONE
        self.initiator: Player | None = None

    @property
    def players(self) -> tuple[Player, ...]:
        return self.game.all_players()

    def add_player(self, name: str) -> Player | None:
        """Seat a player under a random role; returns it, or None if refused."""
        if self.started:
            raise GameError("the game has already started")
        if not name or len(self.players) >= MAX_PLAYERS:
            return None
        if any(p.name == name for p in self.players):
            self.error_message = "Name already exists!"
            return None
        self.error_message = ""
        role = self.rng.choice(list(Role))
        return create_player(self.game, name, role)

    def start(self) -> bool:
        """Begin play if enough players are seated."""
        count = len(self.players)
        if count < 2:
            self.error_message = "Need at least 2 players!"
            return False
        if count > MAX_PLAYERS:
            self.error_message = "Maximum 6 players allowed!"
            return False
        self.error_message = ""
        self.started = True
        print(f"Total players in game after adding: {count}")
        return True

    def _report(self, message: str) -> str:
        print(message)
        return message

    def perform(self, player_index: int, action: str) -> str | None:
        """Press an action button; returns the message shown, if any."""
        if not self.started:
            raise GameError("the game has not started")
        if self.action_state is not ActionState.NONE:
            raise GameError("a target must be selected first")
        player = self.players[player_index]

        if action in _UNTARGETED_LABELS:
            try:
                getattr(player, action)()
            except GameError as exc:
                return self._report(f"{_UNTARGETED_LABELS[action]} failed: {exc}")
            return None

        if action == "INVEST":
            if not isinstance(player, Baron):
                return self._report("Only Baron can perform invest action!")
            try:
                player.invest()
            except GameError as exc:
                return self._report(f"Invest failed: {exc}")
            return None

        state = _TARGETED.get(action)
        if state is None:
            raise ValueError(f"unknown action: {action}")
        self.action_state = state
        self.initiator = player
        return self._report(f"Select target for {state.value} by {player.name}")

    def select_target(self, target_index: int) -> str | None:
        """Complete the pending action against the chosen player."""
        players = self.players
        if not 0 <= target_index < len(players):
            raise IndexError("no player at this seat")
        target = players[target_index]
        state, actor = self.action_state, self.initiator
        self.action_state = ActionState.NONE
        self.initiator = None

        if state is ActionState.NONE or actor is None:
            return self._report("No valid action selected.")
        try:
            return self._apply(state, actor, target)
        except GameError as exc:
            return self._report(f"Action failed: {exc}")

    def _apply(self, state: ActionState, actor: Player, target: Player) -> str | None:
        if state is ActionState.SELECTING_TARGET_FOR_ARREST:
            actor.arrest(target)
        elif state is ActionState.SELECTING_TARGET_FOR_SANCTION:
            actor.sanction(target)
        elif state is ActionState.SELECTING_TARGET_FOR_COUP:
            actor.coup(target)
        elif state is ActionState.SELECTING_TARGET_FOR_CANCEL_COUP:
            if not isinstance(actor, General):
                return self._report("Only General can cancel coup!")
            actor.cancel_coup(target)
        elif state is ActionState.SELECTING_TARGET_FOR_UNDO:
            if not isinstance(actor, (Governor, Judge)):
                return self._report("Only Governor or Judge can undo!")
            actor.undo(target)
        elif state is ActionState.SELECTING_TARGET_FOR_BLOCK_ARREST:
            if not isinstance(actor, Spy):
                return self._report("Only Spy can block arrest!")
            actor.block_arrest(target)
        elif state is ActionState.SELECTING_TARGET_FOR_VIEW_COINS:
            if not isinstance(actor, Spy):
                return self._report("Only Spy can view coins!")
            actor.view_coins(target)
        return None

    def winner_name(self) -> str | None:
        """Name of the single remaining player, or None while play goes on."""
        active = [p for p in self.players if p.active]
        return active[0].name if len(active) == 1 else None

    def status(self) -> dict[str, object] | None:
        """Turn, coins of the player to move and last arrest while play goes on."""
        if sum(p.active for p in self.players) <= 1:
            return None
        current = self.game.turn()
        coins = next((p.coins for p in self.players if p.name == current), 0)
        return {"turn": current, "coins": coins, "last_arrest": self.game.last_arrest}