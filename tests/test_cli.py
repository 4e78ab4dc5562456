from hilite.config import default_config, load
from hilite.config.__main__ import get_value, main, walk


def test_check_missing_file(tmp_path, capsys):
    code = main(["--path", str(tmp_path / "missing.yaml"), "check"])

    assert code == 0
    assert "not found" in capsys.readouterr().out


def test_check_parse_error(tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("general: [", encoding="utf-8")

    code = main(["--path", str(path), "check"])

    assert code == 1
    assert "parse error" in capsys.readouterr().out


def test_check_success(python_config_file, capsys):
    assert main(["--path", str(python_config_file), "check"]) == 0
    assert capsys.readouterr().out.strip() == "configuration loaded"


def test_reset_writes_loadable_defaults(tmp_path, capsys):
    path = tmp_path / "nested" / "config.yaml"

    assert main(["--path", str(path), "reset"]) == 0

    config, status = load(str(path))
    assert status.ok
    assert config == default_config()


def test_reset_refuses_to_overwrite(python_config_file, capsys):
    before = python_config_file.read_text(encoding="utf-8")

    assert main(["--path", str(python_config_file), "reset"]) == 1
    assert python_config_file.read_text(encoding="utf-8") == before

    assert main(["--path", str(python_config_file), "reset", "--force"]) == 0
    assert python_config_file.read_text(encoding="utf-8") != before


def test_env_path_is_used(python_config_file, monkeypatch, capsys):
    monkeypatch.setenv("HILITE_CONFIG", str(python_config_file))

    assert main(["view", "general.tab_width"]) == 0
    assert capsys.readouterr().out.strip() == "8"


def test_view_key(tmp_path, capsys):
    missing = str(tmp_path / "missing.yaml")

    assert main(["--path", missing, "view", "languages.0.name"]) == 0
    assert capsys.readouterr().out.strip() == "Rust"


def test_view_section(tmp_path, capsys):
    missing = str(tmp_path / "missing.yaml")

    assert main(["--path", missing, "view", "theme"]) == 0
    assert "editor_bg:" in capsys.readouterr().out


def test_view_unknown_key(tmp_path, capsys):
    missing = str(tmp_path / "missing.yaml")

    assert main(["--path", missing, "view", "general.nope"]) == 1
    assert "Unknown key" in capsys.readouterr().err


def test_list_keys(tmp_path, capsys):
    assert main(["--path", str(tmp_path / "missing.yaml"), "list"]) == 0

    keys = capsys.readouterr().out.splitlines()
    assert "general.tab_width" in keys
    assert "theme.editor_bg" in keys
    assert "languages.0.keywords" in keys
    assert "languages.0.definitions.comments" in keys


def test_rules(tmp_path, capsys):
    missing = str(tmp_path / "missing.yaml")

    assert main(["--path", missing, "rules", "rs"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert "keywords: 49" in out
    assert "comments: 1" in out


def test_rules_unknown_extension(tmp_path, capsys):
    missing = str(tmp_path / "missing.yaml")

    assert main(["--path", missing, "rules", "xyz"]) == 1
    assert "No language" in capsys.readouterr().err


def test_get_value_and_walk():
    data = {"a": {"b": [1, 2]}, "c": [{"d": 1}]}

    assert get_value(data, "a.b") == [1, 2]
    assert get_value(data, "c.0.d") == 1
    assert list(walk(data)) == ["a.b", "c.0.d"]


def test_no_command_prints_help(tmp_path, capsys):
    assert main(["--path", str(tmp_path / "missing.yaml")]) == 0
    assert "usage" in capsys.readouterr().out
