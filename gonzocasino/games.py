"""The casino games.

Every game's ``play`` takes the bet and two callables: ``ask(prompt)`` returns
the player's answer as text, and ``say(text)`` shows a message. It returns the
gonzos handed back to the player, bet included (0 means the bet is lost).
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Callable, Optional

Ask = Callable[[str], str]
Say = Callable[[str], None]


def _ask_int(ask: Ask, prompt: str) -> int:
    answer = ask(prompt).strip()
    try:
        return int(answer)
    except ValueError:
        raise ValueError(f"se esperaba un numero entero, se recibio {answer!r}") from None


class Game(ABC):
    """A game of chance played against the casino."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    @abstractmethod
    def play(self, bet: float, ask: Ask, say: Say) -> float:
        """Play one round and return the gonzos paid out."""

    @abstractmethod
    def rules(self) -> str:
        """Return the rules as text."""

    @abstractmethod
    def name(self) -> str:
        """Return the game's display name."""


class HigherThan13(Game):
    """Beat the casino's number from 1 to 13, or surrender for half the bet."""

    LOWEST = 1
    HIGHEST = 13
    SURRENDER_OPTION = 1
    SURRENDER_FACTOR = 0.5
    WIN_FACTOR = 2

    def payout(self, player_number: int, casino_number: int, bet: float) -> float:
        """Pay double when the player's number is strictly higher."""
        if player_number > casino_number:
            return self.WIN_FACTOR * bet
        return 0.0

    def play(self, bet: float, ask: Ask, say: Say) -> float:
        player_number = self._rng.randint(self.LOWEST, self.HIGHEST)
        say(f"Tu numero aleatorio es: {player_number}")
        say("Que desea hacer?\n1. Rendirse.\n2. Jugar.")
        option = _ask_int(ask, "Opcion: ")
        if option == self.SURRENDER_OPTION:
            return self.SURRENDER_FACTOR * bet
        casino_number = self._rng.randint(self.LOWEST, self.HIGHEST)
        say(f"Numero casino: {casino_number}")
        return self.payout(player_number, casino_number, bet)

    def rules(self) -> str:
        return "\n".join(
            [
                "=== Reglas de Mayor13 ===",
                "1) El sistema genera un número aleatorio entre 1 y 13 para ti.",
                "2) Tienes dos opciones:",
                "   a) Rendirte: antes de que salga el número del casino, pierdes la mitad de lo apostado.",
                "   b) Jugar: se genera el número aleatorio del casino (1–13) y continúa la ronda.",
                "3) Si tu número es mayor que el número del casino, ganas el doble de lo apostado.",
                "4) Si tu número es menor o igual al número del casino, pierdes todo lo apostado.",
            ]
        )

    def name(self) -> str:
        return "Mayor de 13"


class TwoColors(Game):
    """Match the casino's number (1 to 7) and colour (white or black)."""

    LOWEST = 1
    HIGHEST = 7
    WHITE = 0
    BLACK = 1
    FULL_MATCH_FACTOR = 4
    NUMBER_MATCH_FACTOR = 1.5

    def payout(
        self,
        player_number: int,
        casino_number: int,
        player_color: int,
        casino_color: int,
        bet: float,
    ) -> float:
        """Pay by how much of number and colour coincide."""
        number_match = player_number == casino_number
        color_match = player_color == casino_color
        if number_match and color_match:
            return self.FULL_MATCH_FACTOR * bet
        if number_match:
            return self.NUMBER_MATCH_FACTOR * bet
        if color_match:
            return float(bet)
        return 0.0

    def play(self, bet: float, ask: Ask, say: Say) -> float:
        player_number = self._rng.randint(self.LOWEST, self.HIGHEST)
        casino_number = self._rng.randint(self.LOWEST, self.HIGHEST)
        casino_color = self._rng.randint(self.WHITE, self.BLACK)
        say(f"Tu numero aleatorio es: {player_number}")
        say("Elije un color: \n1. Blanco\n2. Negro")
        player_color = _ask_int(ask, "") - 1
        say(f"Numero casino: {casino_number}")
        say("Color casino: " + ("Blanco." if casino_color == self.WHITE else "Negro."))
        return self.payout(player_number, casino_number, player_color, casino_color, bet)

    def rules(self) -> str:
        return "\n".join(
            [
                "=== Reglas de Dos Colores ===",
                "1) El casino y tú generan un número 1–7.",
                "2) Eligen un color (Blanco o Negro).",
                "3) Coincidencia número+color → ganas 4×.",
                "4) Coincide solo número → ganas 1.5×.",
                "5) Coincide solo color → recuperas apuesta.",
                "6) Si no coincide nada → pierdes apuesta.",
            ]
        )

    def name(self) -> str:
        return "Dos Colores"


class Slots(Game):
    """Three reels showing numbers from 1 to 7."""

    LOWEST = 1
    HIGHEST = 7
    THREE_EQUAL_FACTOR = 7
    STRAIGHT_FACTOR = 1.5
    TRIPLE_SEVEN_FACTOR = 2

    def payout(self, slot1: int, slot2: int, slot3: int, bet: float) -> float:
        """Pay for three equal reels or a descending run."""
        if slot1 == slot2 == slot3:
            return self.THREE_EQUAL_FACTOR * bet
        if slot1 == slot2 + 1 and slot2 == slot3 + 1:
            return self.STRAIGHT_FACTOR * bet
        if slot1 == slot2 == slot3 == 7:
            return self.TRIPLE_SEVEN_FACTOR * bet
        return 0.0

    def play(self, bet: float, ask: Ask, say: Say) -> float:
        say("Calculará tres numeros aleatorios del 1 al 6: ")
        reels = [self._rng.randint(self.LOWEST, self.HIGHEST) for _ in range(3)]
        say("Resultado slots: " + " ".join(str(reel) for reel in reels))
        return self.payout(*reels, bet)

    def rules(self) -> str:
        return "\n".join(
            [
                "=== Reglas de Slots ===",
                "1) La máquina genera 3 números aleatorios entre 1 y 7.",
                "2) Si los tres números son iguales, ganas el doble de lo apostado.",
                "3) Si los tres forman una escalera (ascendente o descendente), ganas la mitad de lo apostado.",
                "4) Si los tres son 7, ganas 7 veces lo apostado.",
                "5) Si no se cumple ninguna de las anteriores, pierdes lo apostado.",
            ]
        )

    def name(self) -> str:
        return "Dos Colores"


class RockPaperScissors(Game):
    """Rock (1), paper (2) or scissors (3) against the casino."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3
    CHOICE_NAMES = {ROCK: "Piedra", PAPER: "Papel", SCISSORS: "Tijera"}
    WIN_FACTOR = 2
    _BEATS = {(ROCK, SCISSORS), (PAPER, ROCK), (SCISSORS, PAPER)}

    def payout(self, player_choice: int, casino_choice: int, bet: float) -> float:
        """Return the bet on a tie, double on a win, nothing on a loss."""
        if player_choice == casino_choice:
            return float(bet)
        if (player_choice, casino_choice) in self._BEATS:
            return self.WIN_FACTOR * bet
        return 0.0

    def play(self, bet: float, ask: Ask, say: Say) -> float:
        player_choice = _ask_int(ask, "Tu elección (1=Piedra, 2=Papel, 3=Tijera): ")
        if player_choice not in self.CHOICE_NAMES:
            raise ValueError(f"eleccion invalida: {player_choice}")
        casino_choice = self._rng.randint(self.ROCK, self.SCISSORS)
        say(
            f"→ Tú:    {self.CHOICE_NAMES[player_choice]}\n"
            f"→ Casino: {self.CHOICE_NAMES[casino_choice]}"
        )
        return self.payout(player_choice, casino_choice, bet)

    def rules(self) -> str:
        return "\n".join(
            [
                "=== Reglas de Piedra, Papel o Tijera ===",
                "1) Elige: 1=Piedra, 2=Papel, 3=Tijera.",
                "2) La máquina elegirá un número al azar.",
                "3) Empate: recuperas tu apuesta.",
                "4) Victoria: ganas 2× lo apostado.",
                "5) Derrota: pierdes la apuesta.",
            ]
        )

    def name(self) -> str:
        return "Piedra, papel o tijera"