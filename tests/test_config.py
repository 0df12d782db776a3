import json

import pytest

from buildstamp import config


def test_config_is_created_with_defaults(tmp_path):
    assert config.get_config() == {"git_backend": "subprocess", "git_timeout": None}
    assert (tmp_path / "config" / "config.json").exists()


def test_set_git_backend_persists():
    config.set_git_backend("gitpython")

    assert config.get_git_backend() == "gitpython"
    with open(config.get_config_file()) as f:
        assert json.load(f)["git_backend"] == "gitpython"


def test_set_git_backend_rejects_unknown():
    with pytest.raises(ValueError, match="Unsupported git backend"):
        config.set_git_backend("mercurial")


def test_git_timeout():
    assert config.get_git_timeout() is None

    config.update_config({"git_timeout": 5})
    assert config.get_git_timeout() == 5.0


def test_missing_keys_fall_back_to_defaults(tmp_path):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "config.json").write_text("{}")

    assert config.get_git_backend() == "subprocess"


def test_load_project_config_missing(tmp_path):
    assert config.load_project_config(tmp_path) == {}


def test_load_project_config(tmp_path):
    (tmp_path / "buildstamp.yml").write_text(
        "version: 1.4.0\n"
        "paths:\n"
        "  scripts: '{commit_hash}/js/[name].js'\n"
        "constants:\n"
        "  DEBUG: false\n"
    )

    loaded = config.load_project_config(tmp_path)

    assert loaded["version"] == "1.4.0"
    assert loaded["paths"]["scripts"] == "{commit_hash}/js/[name].js"
    assert loaded["constants"] == {"DEBUG": False}


def test_load_project_config_empty_file(tmp_path):
    (tmp_path / "buildstamp.yml").write_text("")
    assert config.load_project_config(tmp_path) == {}


def test_load_project_config_invalid_yaml(tmp_path):
    (tmp_path / "buildstamp.yml").write_text("paths: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid YAML"):
        config.load_project_config(tmp_path)


def test_load_project_config_rejects_non_mapping(tmp_path):
    (tmp_path / "buildstamp.yml").write_text("- scripts\n- styles\n")
    with pytest.raises(ValueError, match="mapping"):
        config.load_project_config(tmp_path)

    (tmp_path / "buildstamp.yml").write_text("paths: scripts\n")
    with pytest.raises(ValueError, match="'paths'"):
        config.load_project_config(tmp_path)


def test_read_config_does_not_create_file(tmp_path):
    assert config.read_config() == {"git_backend": "subprocess", "git_timeout": None}
    assert not (tmp_path / "config").exists()


def test_read_config_with_corrupt_file(tmp_path):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "config.json").write_text("{not json")

    assert config.read_config() == config.DEFAULT_CONFIG


def test_read_config_with_non_mapping(tmp_path):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "config.json").write_text("[1, 2]")

    assert config.read_config() == config.DEFAULT_CONFIG


def test_read_config_with_config_dir_under_a_file(monkeypatch, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    monkeypatch.setenv("BUILDSTAMP_CONFIG_DIR", str(blocker / "cfg"))

    assert config.read_config() == config.DEFAULT_CONFIG


def test_get_resolve_settings():
    assert config.get_resolve_settings() == ("subprocess", None)

    config.update_config({"git_backend": "gitpython", "git_timeout": "2.5"})
    assert config.get_resolve_settings() == ("gitpython", 2.5)


def test_get_resolve_settings_falls_back_on_bad_values():
    config.update_config({"git_backend": "mercurial", "git_timeout": "soon"})
    assert config.get_resolve_settings() == ("subprocess", None)

    config.update_config({"git_backend": ["subprocess"], "git_timeout": True})
    assert config.get_resolve_settings() == ("subprocess", None)


def test_load_project_config_rejects_non_string_template(tmp_path):
    (tmp_path / "buildstamp.yml").write_text("paths:\n  scripts: 123\n")
    with pytest.raises(ValueError, match="Path template for 'scripts'"):
        config.load_project_config(tmp_path)


def test_load_project_config_rejects_non_json_constants(tmp_path):
    (tmp_path / "buildstamp.yml").write_text("constants:\n  RELEASED: 2024-01-01\n")
    with pytest.raises(ValueError, match="must be JSON values"):
        config.load_project_config(tmp_path)


def test_load_project_config_rejects_structured_version(tmp_path):
    (tmp_path / "buildstamp.yml").write_text("version:\n  major: 1\n")
    with pytest.raises(ValueError, match="'version'"):
        config.load_project_config(tmp_path)


def test_read_package_version(tmp_path):
    assert config.read_package_version(tmp_path) is None

    (tmp_path / "package.json").write_text('{"version": "2.3.4"}')
    assert config.read_package_version(tmp_path) == "2.3.4"

    (tmp_path / "package.json").write_text('{"name": "app"}')
    assert config.read_package_version(tmp_path) is None

    (tmp_path / "package.json").write_text("{broken")
    assert config.read_package_version(tmp_path) is None
