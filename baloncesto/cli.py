"""Interactive console menus for managing teams and players."""

from __future__ import annotations

import argparse
import sys
from typing import Any, TextIO

from .models import Equipo, Jugador
from .repository import Repository

TEAMS_MENU = (
    "\n---------- Menu de Equipos de Baloncesto ----------\n"
    "1. Agregar equipo\n2. Editar equipo\n3. Eliminar equipo\n4. Consultar todos\n"
    "5. Consultar uno\n6. Menu de jugadores\n7. Salir\nOpcion: "
)

PLAYERS_MENU = (
    "\n---------- Menu de Jugadores ----------\n"
    "1. Agregar jugador\n2. Editar jugador\n3. Eliminar jugador\n4. Consultar todos\n"
    "5. Consultar por equipo\n6. Volver a menu principal\nOpcion: "
)


def _find(entities: list[Any], entity_id: str) -> dict[str, Any] | None:
    return next(
        (e for e in entities if isinstance(e, dict) and e.get("id") == entity_id),
        None,
    )


def _belongs(entity: Any, team_id: str) -> bool:
    return isinstance(entity, dict) and entity.get("equipo_id") == team_id


def _player_line(j: Jugador) -> str:
    return (
        f"ID: {j.id}, Nombre: {j.nombre}, Posicion: {j.posicion}, "
        f"Nacionalidad: {j.nacionalidad}, Edad: {j.edad}, Altura: {j.altura}"
    )


class App:
    """Console application over a team repository and a player repository."""

    def __init__(
        self,
        teams: Repository,
        players: Repository,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.teams = teams
        self.players = players
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _line(self, prompt: str) -> str:
        self._write(prompt)
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def _token(self, prompt: str) -> str:
        words = self._line(prompt).split()
        return words[0] if words else ""

    def _option(self, menu: str) -> int | None:
        try:
            return int(self._token(menu))
        except ValueError:
            return None

    def run(self) -> None:
        """Run the main menu until the user quits or input ends."""
        try:
            self.teams_menu()
        except EOFError:
            pass

    def _ask_team(self, team_id: str = "") -> Equipo:
        if not team_id:
            team_id = self._line("ID: ")
        return Equipo(team_id, self._line("Nombre: "))

    def _ask_player(self, teams: list[Any], player_id: str = "") -> Jugador | None:
        if not player_id:
            player_id = self._line("ID: ")
        nombre = self._line("Nombre: ")
        posicion = self._line("Posicion: ")
        nacionalidad = self._line("Nacionalidad: ")
        edad = self._line("Edad: ")
        altura = self._line("Altura: ")
        equipo_id = self._line("ID del equipo: ")
        if _find(teams, equipo_id) is None:
            self._write("Equipo no existe.\n")
            return None
        return Jugador(player_id, nombre, posicion, nacionalidad, edad, altura, equipo_id)

    def _show_team_players(self, team_id: str, players: list[Any]) -> None:
        shown = False
        for entity in players:
            if _belongs(entity, team_id):
                self._write("  " + _player_line(Jugador.from_json(entity)) + "\n")
                shown = True
        if not shown:
            self._write("  (Sin jugadores registrados)\n")

    def teams_menu(self) -> None:
        """Show the team menu until option 7 is chosen."""
        while True:
            option = self._option(TEAMS_MENU)
            if option == 7:
                return
            if option == 1:
                team = self._ask_team()
                if _find(self.teams.read_all(), team.id) is not None:
                    self._write("ID ya existe.\n")
                else:
                    self.teams.create(team.to_json())
                    self._write("Equipo agregado.\n")
            elif option == 2:
                team_id = self._token("ID a editar: ")
                if _find(self.teams.read_all(), team_id) is None:
                    self._write("No existe ese equipo.\n")
                else:
                    team = self._ask_team(team_id)
                    self.teams.update(team_id, team.to_json())
                    self._write("Equipo actualizado.\n")
            elif option == 3:
                team_id = self._token("ID a eliminar: ")
                if self.teams.remove(team_id):
                    self._write("Equipo eliminado.\n")
                    for entity in self.players.read_all():
                        if _belongs(entity, team_id):
                            self.players.remove(entity["id"])
                else:
                    self._write("No existe ese equipo.\n")
            elif option == 4:
                players = self.players.read_all()
                self._write("\nEquipos registrados:\n")
                for entity in self.teams.read_all():
                    team = Equipo.from_json(entity)
                    self._write(f"ID: {team.id}, Nombre: {team.nombre}\n")
                    self._show_team_players(team.id, players)
            elif option == 5:
                team_id = self._token("ID a consultar: ")
                found = _find(self.teams.read_all(), team_id)
                if found is None:
                    self._write("No existe ese equipo.\n")
                else:
                    team = Equipo.from_json(found)
                    self._write(f"ID: {team.id}, Nombre: {team.nombre}\n")
                    self._write("Jugadores del equipo:\n")
                    self._show_team_players(team.id, self.players.read_all())
            elif option == 6:
                self.players_menu()

    def players_menu(self) -> None:
        """Show the player menu until option 6 is chosen."""
        while True:
            option = self._option(PLAYERS_MENU)
            if option == 6:
                return
            teams = self.teams.read_all()
            if option == 1:
                player = self._ask_player(teams)
                if player is None or not player.id:
                    continue
                if _find(self.players.read_all(), player.id) is not None:
                    self._write("ID ya existe.\n")
                else:
                    self.players.create(player.to_json())
                    self._write("Jugador agregado.\n")
            elif option == 2:
                player_id = self._token("ID a editar: ")
                if _find(self.players.read_all(), player_id) is None:
                    self._write("No existe ese jugador.\n")
                    continue
                player = self._ask_player(teams, player_id)
                if player is None:
                    continue
                self.players.update(player_id, player.to_json())
                self._write("Jugador actualizado.\n")
            elif option == 3:
                player_id = self._token("ID a eliminar: ")
                if self.players.remove(player_id):
                    self._write("Jugador eliminado.\n")
                else:
                    self._write("No existe ese jugador.\n")
            elif option == 4:
                self._write("\nJugadores registrados:\n")
                for entity in self.players.read_all():
                    player = Jugador.from_json(entity)
                    self._write(f"{_player_line(player)}, Equipo: {player.equipo_id}\n")
            elif option == 5:
                team_id = self._token("ID del equipo: ")
                self._write(f"\nJugadores del equipo {team_id}:\n")
                for entity in self.players.read_all():
                    if _belongs(entity, team_id):
                        self._write(_player_line(Jugador.from_json(entity)) + "\n")


def main(argv: list[str] | None = None) -> int:
    """Start the interactive application."""
    parser = argparse.ArgumentParser(description="Manage basketball teams and players.")
    parser.add_argument("--equipos", default="equipos.json", help="teams file")
    parser.add_argument("--jugadores", default="jugadores.json", help="players file")
    args = parser.parse_args(argv)
    App(Repository(args.equipos), Repository(args.jugadores)).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())