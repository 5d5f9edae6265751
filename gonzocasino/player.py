"""Casino players and their gonzo balance."""

from __future__ import annotations

from dataclasses import dataclass


def _format_amount(value: float) -> str:
    return f"{value:g}"


@dataclass
class Player:
    """A registered player holding a balance in gonzos."""

    id: int
    name: str
    gonzos: float
    games_played: int = 0

    def record_game(self) -> None:
        """Count one more game played."""
        self.games_played += 1

    def update_gonzos(self, amount: float) -> None:
        """Add ``amount`` (negative to subtract) to the balance."""
        self.gonzos += amount

    def describe(self) -> str:
        """Return the name, balance and number of games played."""
        return (
            f"Nombre del jugador: {self.name}\n"
            f"Gonzos: {_format_amount(self.gonzos)}\n"
            f"Juegos jugados: {self.games_played}"
        )