"""The casino: registered players, available games and the betting rules."""

from __future__ import annotations

import random
from typing import Dict, Iterator, List, Optional, Sequence

from gonzocasino.games import (
    Ask,
    Game,
    HigherThan13,
    RockPaperScissors,
    Say,
    Slots,
    TwoColors,
)
from gonzocasino.player import Player

PESOS_PER_GONZO = 100
MINIMUM_BET = 1


class CasinoError(Exception):
    """An operation the casino's rules do not allow."""


class UnknownPlayerError(CasinoError):
    """No player is registered under the given id."""


class DuplicatePlayerError(CasinoError):
    """A player with the given id is already registered."""


def pesos_to_gonzos(pesos: float) -> float:
    """Convert an amount of pesos to gonzos."""
    return pesos / PESOS_PER_GONZO


def _default_games(rng: Optional[random.Random]) -> List[Game]:
    return [HigherThan13(rng), TwoColors(rng), Slots(rng), RockPaperScissors(rng)]


class Casino:
    """Keeps the players and games and settles every bet."""

    def __init__(
        self,
        games: Optional[Sequence[Game]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._players: Dict[int, Player] = {1: Player(1, "Pedro rodriguez", 500)}
        self._games: List[Game] = list(games) if games is not None else _default_games(rng)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._players

    def __getitem__(self, player_id: int) -> Player:
        return self._player(player_id)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players.values())

    def __len__(self) -> int:
        return len(self._players)

    def _player(self, player_id: int, message: Optional[str] = None) -> Player:
        try:
            return self._players[player_id]
        except KeyError:
            raise UnknownPlayerError(
                message or "El jugador con la identificacion recibida NO existe"
            ) from None

    def _game(self, game_id: int) -> Game:
        if not 1 <= game_id <= len(self._games):
            raise CasinoError("NO existe el juego que desea jugar")
        return self._games[game_id - 1]

    def player_exists(self, player_id: int) -> bool:
        """Tell whether a player is registered under ``player_id``."""
        return player_id in self._players

    def add_player(self, player_id: int, name: str, pesos: float) -> Player:
        """Register a new player whose pesos are converted to gonzos."""
        if self.player_exists(player_id):
            raise DuplicatePlayerError("El jugador con la identificacion recibida ya existe")
        if pesos <= 0:
            raise CasinoError("El dinero en pesos debe ser mayor que cero")
        player = Player(player_id, name, pesos_to_gonzos(pesos))
        self._players[player.id] = player
        return player

    def remove_player(self, player_id: int) -> Player:
        """Withdraw a player from the casino and return it."""
        player = self._player(player_id)
        del self._players[player_id]
        return player

    def play(self, game_id: int, player_id: int, bet: float, ask: Ask, say: Say) -> float:
        """Play one round; return the gonzos won (positive) or lost (negative)."""
        if bet < MINIMUM_BET:
            raise CasinoError("Debe apostar al menos 1 gonzo")
        player = self._player(
            player_id,
            "El jugador con la identificacion recibida NO existe, no es posible jugar",
        )
        game = self._game(game_id)
        if not self.can_continue(player_id, bet):
            raise CasinoError("No tienes saldo suficiente para jugar")
        won = game.play(bet, ask, say) - bet
        player.update_gonzos(won)
        player.record_game()
        return won

    def can_continue(self, player_id: int, bet: float) -> bool:
        """True when the player holds at least twice the bet."""
        return self._player(player_id).gonzos >= 2 * bet

    def player_info(self, player_id: int) -> str:
        """Return the description of a registered player."""
        return self._player(player_id).describe()

    def recharge(self, player_id: int, pesos: float) -> float:
        """Add pesos, converted to gonzos, to a player's balance; return the gonzos added."""
        player = self._player(player_id)
        if pesos < 0:
            raise CasinoError("La cantidad de dinero a recargar no puede ser negativa")
        gonzos = pesos_to_gonzos(pesos)
        player.update_gonzos(gonzos)
        return gonzos

    def rules(self, game_id: int) -> str:
        """Return the rules of the game numbered ``game_id`` (from 1)."""
        if not 1 <= game_id <= len(self._games):
            raise CasinoError(f"Juego inválido. Seleccione entre 1 y {len(self._games)}.")
        return self._games[game_id - 1].rules()

    def players_listing(self) -> str:
        """Return a listing of every registered player."""
        lines = ["=== Jugadores registrados ==="]
        lines.extend(
            f"ID: {player.id} | Nombre: {player.name} | Gonzos: {player.gonzos:g}"
            for player in self._players.values()
        )
        return "\n".join(lines)

    def games_listing(self) -> str:
        """Return a numbered listing of the available games."""
        lines = ["=== Juegos disponibles ==="]
        lines.extend(f"{number}. {game.name()}" for number, game in enumerate(self._games, 1))
        return "\n".join(lines)