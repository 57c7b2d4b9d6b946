from boundgen.config import BoundgenConfig

TOML_CONTENT = """
[generation]
max-string-length = 20
max-depth = 8
"""


def test_discover_in_current_directory(tmp_path, monkeypatch):
    config_file = tmp_path / "boundgen.toml"
    config_file.write_text(TOML_CONTENT)

    monkeypatch.chdir(tmp_path)

    config = BoundgenConfig.discover()
    assert config.generation.max_string_length == 20
    assert config.generation.max_array_length == 100
    assert config.generation.max_depth == 8
    assert config.config_path == str(config_file.resolve())


def test_discover_in_parent_directory(tmp_path, monkeypatch):
    config_file = tmp_path / "boundgen.toml"
    config_file.write_text(TOML_CONTENT)
    child_dir = tmp_path / "child"
    child_dir.mkdir()

    monkeypatch.chdir(child_dir)

    config = BoundgenConfig.discover()
    assert config.generation.max_depth == 8


def test_discover_not_found(tmp_path, monkeypatch):
    (tmp_path / ".git").mkdir()
    monkeypatch.chdir(tmp_path)

    config = BoundgenConfig.discover()
    assert config.config_path is None
    assert config.generation.max_string_length == 100
    assert config.generation.max_depth is None


def test_discover_stops_at_git_root(tmp_path, monkeypatch):
    # The config file is above the repository root
    (tmp_path / "boundgen.toml").write_text(TOML_CONTENT)
    repo = tmp_path / "repo"
    repo.mkdir()
    (repo / ".git").mkdir()
    child = repo / "child"
    child.mkdir()

    monkeypatch.chdir(child)

    config = BoundgenConfig.discover()
    assert config.config_path is None
    assert config.generation.max_depth is None
