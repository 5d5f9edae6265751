"""Console menu for running the casino."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

from gonzocasino.casino import Casino, CasinoError
from gonzocasino.games import Ask, Say

_GAMES_MENU = (
    "1. Mayor a 13.\n"
    "2. Dos colores.\n"
    "3. Slots\n"
    "4. Piedra, papel o tijera"
)

_MAIN_MENU = (
    "Menu\n"
    "1. Agregar jugador \n"
    "2. Jugar\n"
    "3. Consultar jugador  \n"
    "4. Recargar gonzos \n"
    "5. Retirar jugador casino \n"
    "6. Reglas\n"
    "0. Salir\n"
)


class ConsoleView:
    """Interactive text menu over a :class:`Casino`."""

    def __init__(
        self,
        casino: Optional[Casino] = None,
        ask: Ask = input,
        say: Say = print,
    ) -> None:
        self.casino = casino if casino is not None else Casino()
        self._ask = ask
        self._say = say
        self._actions: dict[int, Callable[[], None]] = {
            1: self._add_player,
            2: self._play,
            3: self._show_player,
            4: self._recharge,
            5: self._remove_player,
            6: self._show_rules,
        }

    def _ask_int(self, prompt: str) -> int:
        return int(self._ask(prompt).strip())

    def _ask_float(self, prompt: str) -> float:
        return float(self._ask(prompt).strip())

    def _menu_option(self) -> Optional[int]:
        self._say(_MAIN_MENU)
        try:
            return self._ask_int("Digita el numero: ")
        except ValueError:
            return None

    def run(self) -> None:
        """Show the menu and serve options until the user quits or input ends."""
        try:
            while True:
                option = self._menu_option()
                if option == 0:
                    self._say("Hasta pronto !")
                    return
                action = self._actions.get(option) if option is not None else None
                if action is None:
                    self._say("No hay ninguna opcion para ese numero")
                    continue
                try:
                    action()
                except CasinoError as error:
                    self._say(str(error))
                except ValueError:
                    self._say("Entrada invalida")
        except EOFError:
            return

    def _add_player(self) -> None:
        name = self._ask("Ingrese el nombre del jugador \n").strip()
        while True:
            try:
                player_id = self._ask_int("Ingrese el id del jugador \n")
            except ValueError:
                continue
            if not self.casino.player_exists(player_id):
                break
            self._say("El jugador con la identificacion recibida ya existe")
        while True:
            try:
                pesos = self._ask_float("Ingrese el dinero en pesos \n")
            except ValueError:
                continue
            if pesos > 0:
                break
        try:
            self.casino.add_player(player_id, name, pesos)
        except CasinoError as error:
            self._say(f"ERROR con parámetros: {error}")
            return
        self._say("Jugador agregado exitosamente  ")

    def _play(self) -> None:
        player_id = self._ask_int("Ingrese el id del jugador para el que quiere jugar \n")
        bet = self._ask_float("Cuantos gonzos desea apostar \n")
        self._say("Elija el juego: \n" + _GAMES_MENU)
        game_id = self._ask_int("Opcion: ")
        result = self.casino.play(game_id, player_id, bet, self._ask, self._say)
        if result > 0:
            text = "Haz ganado!: "
        elif result < 0:
            text = "Haz perdido :(!: "
        else:
            text = "Empate! No pierdes nada:  "
        self._say(f"{text}{result:g} Gonzos")

    def _show_player(self) -> None:
        player_id = self._ask_int("Ingrese el id del jugador: ")
        self._say(self.casino.player_info(player_id))

    def _recharge(self) -> None:
        player_id = self._ask_int("Ingrese el id del jugador: ")
        if not self.casino.player_exists(player_id):
            self._say("El jugador con la identificacion recibida NO existe")
            return
        while True:
            try:
                pesos = self._ask_float("Ingrese la cantidad de dinero  a recargar: ")
            except ValueError:
                continue
            if pesos >= 0:
                break
        self.casino.recharge(player_id, pesos)
        self._say("Recarga realizada con exito.")

    def _remove_player(self) -> None:
        player_id = self._ask_int("Ingrese el id del jugador: ")
        self._say(self.casino.player_info(player_id))
        self.casino.remove_player(player_id)
        self._say("Jugador retirado con exito.")

    def _show_rules(self) -> None:
        self._say("Elija el juego para ver sus reglas: \n" + _GAMES_MENU)
        game_id = self._ask_int("Opcion: ")
        self._say(self.casino.rules(game_id))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive casino menu."""
    parser = argparse.ArgumentParser(
        prog="gonzocasino", description="Casino de gonzos en la consola."
    )
    parser.parse_args(argv)
    ConsoleView().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())