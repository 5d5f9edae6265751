# gonzocasino

A small casino that you play in the terminal. The prompts and messages are in
Spanish. Players sign up with an amount of pesos, which is converted to gonzos
at 100 pesos to 1 gonzo. They then bet those gonzos on one of four games.

Each game pays out an amount that includes the bet. A payout of 0 means the bet
is lost.

1. **Mayor de 13**: you draw a number from 1 to 13. You can surrender at this
   point and get half your bet back. If you play on, the casino also draws a
   number from 1 to 13. If your number is strictly higher, you are paid 2× your
   bet. Otherwise you lose the bet.
2. **Dos Colores**: you and the casino each draw a number from 1 to 7. You pick
   a colour (white or black) and the casino draws one.
   - Number and colour both match: 4× your bet.
   - Only the number matches: 1.5× your bet.
   - Only the colour matches: your bet back.
   - Nothing matches: you lose the bet.
3. **Slots**: three reels, each showing 1 to 7.
   - Three equal reels: 7× your bet.
   - A descending run such as 5 4 3: 1.5× your bet.
   - Anything else: you lose the bet.
4. **Piedra, papel o tijera**: you choose 1 = rock, 2 = paper or 3 = scissors.
   The casino chooses at random. A win pays 2× your bet, a tie returns your bet
   and a loss takes it.

A bet must be at least 1 gonzo. It is accepted only if the player holds at
least twice the amount wagered.

## Installing

```
pip install .
```

## Playing

```
gonzocasino
```

The command runs `gonzocasino.view.main`, which shows a menu with these options:

- add a player
- play
- look up a player
- recharge gonzos
- remove a player
- read a game's rules

Enter `0` to quit. The menu also closes when input ends. One player already
exists when the casino starts: id `1`, "Pedro rodriguez", with 500 gonzos.

## Using it from code

```python
import random
from gonzocasino.casino import Casino, pesos_to_gonzos

casino = Casino(rng=random.Random(42))   # seeded for repeatable draws
casino.add_player(7, "Ana", 10000)       # 10000 pesos -> 100 gonzos
print(casino.players_listing())
print(casino.games_listing())
print(casino.rules(3))

won = casino.play(4, 7, 10, ask=lambda prompt: "1", say=print)
print(won, casino[7].gonzos, casino[7].games_played)
```

### `gonzocasino.casino`

- `Casino(games=None, rng=None)` holds the players and the games. Games are
  numbered from 1. Pass your own list of `Game` objects in `games`, or pass a
  `random.Random` in `rng` to be shared by the four default games.
- `play(game_id, player_id, bet, ask, say)` runs one round. It returns the
  gonzos won, which is negative for a loss, and updates the player's balance and
  game count. `ask(prompt)` must return the player's answer as text. `say(text)`
  receives the game's messages.
- `add_player`, `remove_player`, `recharge`, `player_exists`, `can_continue`,
  `player_info`, `rules`, `players_listing` and `games_listing` cover the rest.
- A `Casino` also supports `player_id in casino`, `casino[player_id]`, `len()`
  and iteration over its `Player` objects.
- `pesos_to_gonzos(pesos)` converts pesos to gonzos.

Errors:

- Breaking the casino's rules raises `CasinoError`. This covers a bet that is
  too small, too little balance, an unknown game and a non-positive sign-up
  amount.
- An unknown player raises `UnknownPlayerError`.
- A repeated id raises `DuplicatePlayerError`.
- An answer from `ask` that is not a valid number or choice raises `ValueError`.

### `gonzocasino.games`

`Game` is the abstract base class, with `play(bet, ask, say)`, `rules()` and
`name()`. The four games are `HigherThan13`, `TwoColors`, `Slots` and
`RockPaperScissors`. Each one has a `payout(...)` method that works out the
payout from given draws, without randomness or input. `Slots.name()` returns
"Dos Colores".

### `gonzocasino.player`

`Player` is a dataclass with these fields:

- `id`
- `name`
- `gonzos`
- `games_played`

It also has `update_gonzos(amount)`, `record_game()` and `describe()`.

## What it does not do

Players and balances live only in memory. Nothing is saved, so every start
begins again with the single default player.

## Tests

```
pip install .[test]
pytest
```