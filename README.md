# baloncesto

A small interactive console program for keeping track of basketball teams
(`equipos`) and their players (`jugadores`). The data lives in two JSON files.
By default these are `equipos.json` and `jugadores.json` in the current
working directory. The menus and messages are in Spanish.

## Installation

```
pip install .
```

## Usage

```
baloncesto [--equipos FILE] [--jugadores FILE]
```

- `--equipos FILE`: the teams file (default `equipos.json`)
- `--jugadores FILE`: the players file (default `jugadores.json`)

The program reads a menu option on each line. It stops when you choose to
quit or when input ends.

The main menu manages teams:

1. Add a team. You give an ID and a name. An ID that already exists is refused.
2. Edit a team. You give the team's ID, then its new name.
3. Delete a team. This also deletes every player assigned to it.
4. List all teams together with their players.
5. Show one team and its players.
6. Open the players menu.
7. Quit.

The players menu manages players. Each player has an ID, name, position,
nationality, age, height and team ID, all kept as text. A player can only be
assigned to a team that already exists. Otherwise the program prints
`Equipo no existe.` and nothing is saved.

1. Add a player. An ID that already exists is refused.
2. Edit a player.
3. Delete a player.
4. List all players with their team IDs.
5. List the players of one team.
6. Return to the main menu.

## Library use

The pieces also work on their own:

```python
from baloncesto.models import Equipo, Jugador
from baloncesto.repository import Repository

equipos = Repository("equipos.json")
equipos.create(Equipo("LAL", "Lakers").to_json())
for data in equipos.read_all():
    print(Equipo.from_json(data))
```

- `Equipo` and `Jugador` are dataclasses.
  - `to_json()` returns a plain dictionary.
  - `from_json(data)` builds an instance from a mapping. It raises `KeyError` when a field is missing.
- `Repository(filename)` stores a list of JSON objects in one file. The file is written with four-space indentation and sorted keys.
  - `create(entity)` appends an entity.
  - `read_all()` returns the stored list. It returns `[]` if the file cannot be opened or does not hold a JSON array.
  - `update(entity_id, new_entity)` replaces the first entity whose `"id"` matches. It returns whether one was found.
  - `remove(entity_id)` deletes every entity whose `"id"` matches. It returns whether any was removed.
- `baloncesto.cli.App(teams, players, stdin=None, stdout=None)` runs the menus over two repositories.
  - `run()` starts the main menu.
  - `teams_menu()` and `players_menu()` run the two menus directly.
  - `main(argv=None)` is the entry point of the `baloncesto` command.

## Limitations

All data is kept in the two JSON files. There is no database, locking or
concurrent access. Each operation re-reads and rewrites the whole file.
A file holding invalid JSON makes the program stop with an error.

## Tests

```
pip install .[test]
pytest
```