"""Graphical table for a game of Coup: layout, hit testing and the window loop."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from coupgame.controller import BASIC_ACTIONS, ActionState, GameSession, actions_for
from coupgame.player import Player

WINDOW_SIZE = (600, 400)
BACKGROUND = (139, 69, 19)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
BLUE = (0, 0, 255)
YELLOW = (255, 255, 0)

BOX_X = 10.0
BOX_WIDTH = 90.0
BOX_HEIGHT = 25.0
START_Y = 70.0
SPACING_Y = 45.0
ACTION_START_X = 110.0
BUTTON_WIDTH = 55.0
BUTTON_HEIGHT = 18.0
SPACING_X = 3.0

_START_BUTTON = (200.0, 300.0, 200.0, 50.0)
_ADD_BUTTON = (225.0, 300.0, 150.0, 40.0)
_PLAY_BUTTON = (250.0, 350.0, 100.0, 40.0)


@dataclass(frozen=True)
class ActionButton:
    """One clickable action next to a player's name."""

    x: float
    y: float
    width: float
    height: float
    player_index: int
    action: str
    special: bool = False

    def contains(self, position: tuple[float, float]) -> bool:
        """Whether a point lies inside the button (right and bottom edges excluded)."""
        return _inside((self.x, self.y, self.width, self.height), position)


def _inside(rect: tuple[float, float, float, float], position: tuple[float, float]) -> bool:
    left, top, width, height = rect
    px, py = position
    return left <= px < left + width and top <= py < top + height


def _row_top(index: int) -> float:
    return START_Y + index * SPACING_Y


def button_layout(players: Sequence[Player]) -> list[ActionButton]:
    """Action buttons for every seated player, basic actions first, then the role's own."""
    buttons: list[ActionButton] = []
    step = BUTTON_WIDTH + SPACING_X
    for index, player in enumerate(players):
        top = _row_top(index)
        for column, action in enumerate(actions_for(player.role)):
            special = column >= len(BASIC_ACTIONS)
            buttons.append(
                ActionButton(
                    x=ACTION_START_X + column * step,
                    y=top if special else top + 2.0,
                    width=BUTTON_WIDTH,
                    height=BUTTON_HEIGHT,
                    player_index=index,
                    action=action,
                    special=special,
                )
            )
    return buttons


def target_at(position: tuple[float, float], count: int) -> int | None:
    """Index of the player box under the point, or None."""
    px, py = position
    if not BOX_X <= px <= BOX_X + BOX_WIDTH:
        return None
    for index in range(count):
        top = _row_top(index)
        if top <= py <= top + BOX_HEIGHT:
            return index
    return None


def button_at(buttons: Iterable[ActionButton], position: tuple[float, float]) -> ActionButton | None:
    """The first button under the point, or None."""
    return next((b for b in buttons if b.contains(position)), None)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="coupgame",
        description="Play Coup at a graphical table.",
    )
    parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        return _run(pygame)
    finally:
        pygame.quit()


def _run(pygame) -> int:  # noqa: C901 - one event loop for three screens
    window = pygame.display.set_mode(WINDOW_SIZE)
    pygame.display.set_caption("Coup Game GUI")
    clock = pygame.time.Clock()
    fonts: dict[int, object] = {}

    def font(size: int):
        if size not in fonts:
            fonts[size] = pygame.font.Font(None, size)
        return fonts[size]

    def text(content: str, size: int, color, pos, *, center_x: bool = False):
        surface = font(size).render(content, True, color)
        x, y = pos
        if center_x:
            x -= surface.get_width() / 2
        window.blit(surface, (x, y))
        return surface

    def rect(area, color):
        pygame.draw.rect(window, color, pygame.Rect(*(int(v) for v in area)))

    session = GameSession()
    screen = "start"
    current_input = ""
    seated: list[str] = []
    running = True

    pygame.key.start_text_input()
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                continue
            if screen == "add" and event.type == pygame.KEYDOWN:
                if event.key == pygame.K_BACKSPACE:
                    current_input = current_input[:-1]
            if screen == "add" and event.type == pygame.TEXTINPUT:
                current_input += "".join(
                    ch for ch in event.text if ord(ch) < 128 and ch not in "\r\b"
                )
            if event.type != pygame.MOUSEBUTTONDOWN:
                continue

            mouse = (float(event.pos[0]), float(event.pos[1]))
            if screen == "game" and event.button == 1:
                if session.action_state is not ActionState.NONE:
                    index = target_at(mouse, len(session.players))
                    if index is not None:
                        session.select_target(index)
                else:
                    pressed = button_at(button_layout(session.players), mouse)
                    if pressed is not None:
                        session.perform(pressed.player_index, pressed.action)

            if screen == "start" and _inside(_START_BUTTON, mouse):
                screen = "add"
            if screen == "add" and _inside(_ADD_BUTTON, mouse) and current_input:
                player = session.add_player(current_input)
                if player is not None:
                    seated.append(f"{player.name} - {player.role.value}")
                    current_input = ""
            if screen == "add" and _inside(_PLAY_BUTTON, mouse):
                if session.start():
                    screen = "game"

        window.fill(BACKGROUND)
        width = WINDOW_SIZE[0]
        if screen == "start":
            text("COUP GAME", 64, WHITE, (width / 2, 50), center_x=True)
            rect(_START_BUTTON, WHITE)
            text("START", 32, BLACK, (width / 2, 312), center_x=True)
        elif screen == "add":
            text("Enter name of player to add...", 26, YELLOW, (width / 2, 20), center_x=True)
            for row, label in enumerate(seated):
                rect((50, 50 + row * 50, 300, 30), WHITE)
                text(label, 24, BLACK, (60, 56 + row * 50))
            rect(_ADD_BUTTON, WHITE)
            text("ADD PLAYER", 26, BLACK, (300, 310), center_x=True)
            text(current_input, 26, WHITE, (50, 260))
            rect(_PLAY_BUTTON, WHITE)
            text("PLAY", 26, BLACK, (300, 360), center_x=True)
            if session.error_message:
                text(session.error_message, 24, RED, (50, 220))
        else:
            text("GAME IN PROGRESS", 26, WHITE, (width / 2, 12), center_x=True)
            for index, player in enumerate(session.players):
                top = _row_top(index)
                rect((BOX_X, top, BOX_WIDTH, BOX_HEIGHT), WHITE)
                text(f"{player.name} ({player.role.value})", 16, BLACK, (15, top + 8))
            for button in button_layout(session.players):
                rect((button.x, button.y, button.width, button.height),
                     BLUE if button.special else RED)
                text(button.action, 14, WHITE if button.special else BLACK,
                     (button.x + button.width / 2, button.y + 4), center_x=True)

            winner = session.winner_name()
            if winner is not None:
                text(f"Winner: {winner}", 26, YELLOW, (width / 2, 50), center_x=True)
                text("Congratulations!", 22, WHITE, (width / 2, 97), center_x=True)
            else:
                status = session.status()
                if status is not None:
                    for offset, line in enumerate((
                        f"Turn: {status['turn']}",
                        f"Coins: {status['coins']}",
                        f"Last Arrest: {status['last_arrest']}",
                    )):
                        surface = font(26).render(line, True, YELLOW)
                        window.blit(surface, (width - surface.get_width() - 10, 10 + offset * 20))

        pygame.display.flip()
        clock.tick(60)
    return 0


if __name__ == "__main__":
    sys.exit(main())