import io

from baloncesto.cli import App, main
from baloncesto.repository import Repository


def run_app(tmp_path, script):
    teams = Repository(tmp_path / "equipos.json")
    players = Repository(tmp_path / "jugadores.json")
    out = io.StringIO()
    App(teams, players, io.StringIO(script), out).run()
    return teams, players, out.getvalue()


def add_team(team_id, name):
    return f"1\n{team_id}\n{name}\n"


def add_player(pid, name, team_id):
    return f"6\n1\n{pid}\n{name}\nBase\nChile\n22\n1.90\n{team_id}\n6\n"


def test_add_team_and_list(tmp_path):
    teams, _, out = run_app(tmp_path, add_team("A1", "Lakers") + "4\n7\n")
    assert "Equipo agregado." in out
    assert "ID: A1, Nombre: Lakers" in out
    assert "(Sin jugadores registrados)" in out
    assert teams.read_all() == [{"id": "A1", "nombre": "Lakers"}]


def test_duplicate_team_rejected(tmp_path):
    teams, _, out = run_app(
        tmp_path, add_team("A1", "Lakers") + add_team("A1", "Otro") + "7\n"
    )
    assert "ID ya existe." in out
    assert len(teams.read_all()) == 1


def test_edit_team(tmp_path):
    teams, _, out = run_app(tmp_path, add_team("A1", "Lakers") + "2\nA1\nHeat\n7\n")
    assert "Equipo actualizado." in out
    assert teams.read_all() == [{"id": "A1", "nombre": "Heat"}]


def test_edit_missing_team(tmp_path):
    _, _, out = run_app(tmp_path, "2\nZZ\n7\n")
    assert "No existe ese equipo." in out


def test_add_player_requires_existing_team(tmp_path):
    _, players, out = run_app(tmp_path, add_player("J1", "Ana", "NOPE") + "7\n")
    assert "Equipo no existe." in out
    assert players.read_all() == []


def test_add_player_and_show_team(tmp_path):
    script = add_team("A1", "Lakers") + add_player("J1", "Ana", "A1") + "5\nA1\n7\n"
    _, players, out = run_app(tmp_path, script)
    assert "Jugador agregado." in out
    assert "Jugadores del equipo:" in out
    assert "  ID: J1, Nombre: Ana, Posicion: Base" in out
    assert players.read_all()[0]["equipo_id"] == "A1"


def test_delete_team_cascades_to_players(tmp_path):
    script = (
        add_team("A1", "Lakers")
        + add_team("B2", "Bulls")
        + add_player("J1", "Ana", "A1")
        + add_player("J2", "Beto", "B2")
        + "3\nA1\n7\n"
    )
    teams, players, out = run_app(tmp_path, script)
    assert "Equipo eliminado." in out
    assert [t["id"] for t in teams.read_all()] == ["B2"]
    assert [p["id"] for p in players.read_all()] == ["J2"]


def test_player_menu_listing_and_delete(tmp_path):
    script = (
        add_team("A1", "Lakers")
        + add_player("J1", "Ana", "A1")
        + "6\n4\n3\nJ1\n3\nJ1\n6\n7\n"
    )
    _, players, out = run_app(tmp_path, script)
    assert "Equipo: A1" in out
    assert "Jugador eliminado." in out
    assert "No existe ese jugador." in out
    assert players.read_all() == []


def test_edit_player(tmp_path):
    script = (
        add_team("A1", "Lakers")
        + add_player("J1", "Ana", "A1")
        + "6\n2\nJ1\nAna Maria\nAlero\nChile\n23\n1.91\nA1\n6\n7\n"
    )
    _, players, out = run_app(tmp_path, script)
    assert "Jugador actualizado." in out
    assert players.read_all()[0]["posicion"] == "Alero"


def test_invalid_option_and_eof_end_cleanly(tmp_path):
    teams, _, out = run_app(tmp_path, "abc\n")
    assert out.count("Menu de Equipos de Baloncesto") == 2
    assert teams.read_all() == []


def test_main_uses_given_files(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nX\nYankees\n7\n"))
    monkeypatch.setattr("sys.stdout", io.StringIO())
    teams_file = tmp_path / "t.json"
    code = main(["--equipos", str(teams_file), "--jugadores", str(tmp_path / "p.json")])
    assert code == 0
    assert Repository(teams_file).read_all() == [{"id": "X", "nombre": "Yankees"}]