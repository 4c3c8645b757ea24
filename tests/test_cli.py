import io
import json

import pytest

from cli.main import CaremeCLI, main


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("narration: silent\nlog_level: WARNING\ncook_name: Test cook\n")
    return path


def make_cli(config_file, text=""):
    return CaremeCLI(str(config_file), stdin=io.StringIO(text), stdout=io.StringIO())


def test_dishes_lists_the_menu(config_file):
    cli = make_cli(config_file)
    cli.dishes()
    output = cli._stdout.getvalue()

    assert "Chicken soup" in output
    assert "Simple sauce" in output
    assert "boil" in output


def test_cook_by_number_and_name(config_file):
    cli = make_cli(config_file)
    cli.cook(11)
    cli.cook("hot_dog")
    output = cli._stdout.getvalue()

    assert "Rice is served! (3 ticks, 900s simulated)" in output
    assert "Hot dog is served!" in output


def test_cook_as_json(config_file):
    cli = make_cli(config_file)
    cli.cook("steak", as_json=True)
    report = json.loads(cli._stdout.getvalue())

    assert report["kind"] == "steak"
    assert report["ticks"] == 8


def test_cook_unknown_dish(config_file):
    with pytest.raises(ValueError):
        make_cli(config_file).cook("souffle")


def test_status(config_file):
    cli = make_cli(config_file)
    cli.status()
    status = json.loads(cli._stdout.getvalue())

    assert status["cook"] == "Test cook"
    assert status["stocks"]["rice"]["grams"] == 1000.0


def test_menu_runs_from_stdin(config_file):
    cli = make_cli(config_file, "2\n0\n")
    cli.menu()
    assert "Salad is served!" in cli._stdout.getvalue()


def test_console_narration_goes_to_the_cli_stream(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("narration: console\n")
    cli = make_cli(path)
    cli.cook("rice")

    assert "=== Cooking: Rice ===" in cli._stdout.getvalue()


def test_version(config_file):
    cli = make_cli(config_file)
    cli.version()
    assert "Version: 1.0.0" in cli._stdout.getvalue()


def test_main_runs_a_command(config_file, capsys):
    main([str(config_file), "version"])
    assert "Careme Kitchen Simulation" in capsys.readouterr().out


def test_main_reports_errors_and_exits(config_file, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([str(config_file), "cook", "99"])

    assert exc_info.value.code == 1
    assert "Error: Unknown dish: 99" in capsys.readouterr().out


def test_main_exits_non_zero_when_interrupted(config_file, capsys, monkeypatch):
    def interrupted(self):
        raise KeyboardInterrupt

    monkeypatch.setattr(CaremeCLI, "version", interrupted)
    with pytest.raises(SystemExit) as exc_info:
        main([str(config_file), "version"])

    assert exc_info.value.code == 1
    assert "Interrupted by user" in capsys.readouterr().out


def test_only_commands_are_public(config_file):
    cli = make_cli(config_file)
    public = {name for name in vars(cli) if not name.startswith("_")}
    commands = {name for name in dir(CaremeCLI) if not name.startswith("_")}

    assert public == set()
    assert commands == {"menu", "dishes", "cook", "status", "version"}
