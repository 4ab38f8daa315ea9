import logging

import pytest

from filed_recipes import main


RECIPE_FILE = """
[Recept]
Pannkakor
[Ingredienser]
3;dl;mjölk
2;st;ägg
[Instruktioner]
Blanda allt.
Stek i smör.
[Recept]
Bullar/Vetebröd
[Ingredienser]
5;dl;vetemjöl
[Instruktioner]
Baka.
"""


@pytest.fixture
def recipe_path(tmp_path):
    path = tmp_path / "recipes.txt"
    path.write_text(RECIPE_FILE, encoding="utf-8")
    return path


def test_list_reads_path_from_environment(recipe_path, monkeypatch, capsys):
    monkeypatch.setenv("RECIPES_PATH", str(recipe_path))

    main(["list"])

    out = capsys.readouterr().out
    assert out.splitlines() == [
        "0. Bullar/Vetebröd (1 ingr., 1 steps)",
        "1. Pannkakor (2 ingr., 2 steps)",
    ]


def test_show_prints_markdown(recipe_path, capsys):
    main(["--file", str(recipe_path), "show", "1"])

    out = capsys.readouterr().out
    assert out.startswith("# Pannkakor\n")
    assert "- 3 dl mjölk" in out
    assert "2. Stek i smör." in out


def test_delete_saves_file(recipe_path, capsys):
    main(["--file", str(recipe_path), "delete", "0"])

    assert "Deleted: Bullar/Vetebröd" in capsys.readouterr().out
    text = recipe_path.read_text(encoding="utf-8")
    assert "Bullar" not in text
    assert text.startswith("[Recept]\nPannkakor\n")


def test_export_writes_markdown_files(recipe_path, tmp_path):
    out_dir = tmp_path / "out"

    main(["--file", str(recipe_path), "export", "--out-dir", str(out_dir)])

    assert sorted(p.name for p in out_dir.iterdir()) == ["Bullar-Vetebröd.md", "Pannkakor.md"]
    assert (out_dir / "Pannkakor.md").read_text(encoding="utf-8").startswith("# Pannkakor")


def test_bad_index_exits(recipe_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--file", str(recipe_path), "show", "5"])
    assert "out of range" in str(excinfo.value.code)


def test_malformed_file_exits(tmp_path):
    path = tmp_path / "recipes.txt"
    path.write_text("Pannkakor\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--file", str(path), "list"])
    assert "Malformed recipe file" in str(excinfo.value.code)


def test_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--file", str(tmp_path / "missing.txt"), "list"])
    assert "Could not access recipe file" in str(excinfo.value.code)


def test_repeated_runs_do_not_add_log_handlers(recipe_path, capsys):
    main(["--file", str(recipe_path), "list"])
    handlers = list(logging.root.handlers)

    main(["--file", str(recipe_path), "list"])

    assert logging.root.handlers == handlers
