# coupgame

A small engine for a Coup-style game for two to six players. Each player has
a role: Governor, Spy, Baron, General, Judge or Merchant. Players take turns
collecting coins and spending them against each other. The game ends when
only one player is still in it.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

Open the graphical table (pygame) with:

```
coup-game
```

1. Press **START**.
2. Type a name and press **ADD PLAYER**. Do this once for each player, up to
   six. Each player gets a random role. A duplicate name is refused with
   "Name already exists!".
3. Press **PLAY** once at least two players are seated.

Each player's row holds the basic actions: gather, tax, bribe, arrest,
sanction and coup. After them come the role's own buttons:

| Role     | Buttons                  |
|----------|--------------------------|
| Governor | UNDO                     |
| Judge    | UNDO                     |
| Spy      | view coins, block arrest |
| Baron    | INVEST                   |
| General  | cancel coup              |
| Merchant | none                     |

Some actions need a target: arrest, sanction, coup, UNDO, cancel coup, block
arrest and view coins. For these, click the action button and then click the
target's name box. Messages about refused actions are printed to the
terminal.

The top right corner shows:

- whose turn it is,
- that player's coins,
- the last arrested player.

Once one player is left, the table shows the winner instead.

Run three scripted demonstration games in the terminal with:

```
coup-demo
```

The demo prints each move to standard output. Moves that break a rule are
reported on standard error.

## Using the library

```python
from coupgame.game import Game
from coupgame.roles import Governor, Spy, Baron

game = Game()
governor = Governor(game, "Moshe")
spy = Spy(game, "Yossi")
baron = Baron(game, "Meirav")

governor.tax()      # the Governor takes three coins
spy.gather()        # one coin
baron.gather()

print(game.turn())      # "Moshe"
print(game.players())   # names of the active players
```

Creating a player seats it in the game. A game holds at most six players, and
names must be unique and non-empty.

An illegal move raises `coupgame.game.GameError`, a subclass of
`RuntimeError`. Its message explains the problem, for example
`"Not spy's turn"`.

### Modules

- `coupgame.game`: `Game` and `GameError`. `Game` provides:
  - the player list: `players()`, `all_players()`;
  - turn order: `turn()`, `next_turn()`, `back_turn()`;
  - the result: `winner()`;
  - the `last_arrest` attribute.
- `coupgame.player`: the `Role` enum and `Player`, which holds the basic
  actions. A player's `coins`, `active`, `last_action` and `status` can be
  read.
- `coupgame.roles`: `Baron`, `General`, `Governor`, `Judge`, `Merchant` and
  `Spy`.
- `coupgame.controller`: the flow behind the table:
  - `GameSession` seats players with random roles and starts play.
  - `GameSession.perform` handles action buttons.
  - `GameSession.select_target` handles target clicks.
  - `create_player` and `actions_for` are helpers.
- `coupgame.gui`: the pygame window, with `button_layout`, `target_at` and
  `button_at` for hit testing.
- `coupgame.demo`: `run_demo()` plays the scripted games.

### Rules in brief

**Basic actions**

- **gather**: take 1 coin.
- **tax**: take 2 coins. The Governor takes 3.
- **bribe**: pay 4 coins after your move to take the turn back. You cannot
  bribe while it is already your turn. A Judge can cancel the bribe with
  `undo`, and the turn then passes on.
- **arrest**: take 1 coin from another active player who holds at least one
  coin. The same player cannot be arrested twice in a row. Two roles are
  treated differently:
  - A Merchant target pays 2 coins to the bank instead.
  - A General target loses nothing, but the arresting player still gains 1.
- **sanction**: pay 3 coins, or 4 against a Judge. The target cannot gather
  or tax until they take another action. A sanctioned Baron gets 1 coin as
  compensation.
- **coup**: pay 7 coins to put a player out of the game.

A player with 10 or more coins cannot gather, tax, bribe, arrest or sanction,
and must coup.

**Role abilities**

- Baron: `invest()` turns 3 coins into 6 and uses up the turn.
- General: `cancel_coup(target)` pays 5 coins to bring a couped player back.
  It does not use up the turn.
- Governor: `undo(target)` takes back 2 coins from a player whose last action
  was tax, once per player.
- Judge: `undo(target)` cancels a bribe.
- Merchant: gains a bonus coin when acting with 3 or more coins.
- Spy:
  - `view_coins(target)` returns the target's coins.
  - `block_arrest(target)` stops the target arresting until they act.
  - Neither uses up the turn.

`Game.winner()` returns the name of the last player still in the game. It
raises `GameError` while more than one player is active.

## What it does not do

- Play happens on one screen or in one Python process. There is no network
  play.
- Games are not saved.
- There are no computer opponents.
- Players draw no hidden cards, and there is no bluffing or challenging.
  Roles are fixed when a player is seated.