"""Tests for descriptor.py — ProjectDescriptor, validation and load_descriptor."""

import os
from pathlib import Path

import pytest

from jarsmith.descriptor import (
    Backend,
    FeatureFlags,
    load_descriptor,
    parse_descriptor,
    validate_descriptor,
)
from jarsmith.errors import ConfigError

_MINIMAL_TOML = """\
[project]
name = "demo"
version = "1.0.0"
main_class = "Main"
base_namespace = "com.example"
"""


def _write_project(tmp_path: Path, toml: str = _MINIMAL_TOML) -> Path:
    (tmp_path / "jarsmith.toml").write_text(toml)
    (tmp_path / "src").mkdir(exist_ok=True)
    return tmp_path


# ---------------------------------------------------------------------------
# ProjectDescriptor unit tests
# ---------------------------------------------------------------------------


class TestProjectDescriptor:
    def test_defaults(self, descriptor):
        assert descriptor.backend is Backend.GRADLE
        assert descriptor.features == FeatureFlags(fat_archive=True, wrapper=True)
        assert descriptor.gradle_version == "8.4"
        assert descriptor.shadow_plugin_version == "7.1.2"

    def test_entry_point_fqn(self, descriptor):
        assert descriptor.entry_point_fqn == "com.example.Main"

    def test_archive_name(self, descriptor):
        assert descriptor.archive_name == "demo-1.0.0.jar"

    def test_dependencies_are_read_only(self, make_descriptor):
        deps = {"a": "g:a:1"}
        d = make_descriptor(dependencies=deps)
        deps["b"] = "g:b:1"
        assert dict(d.dependencies) == {"a": "g:a:1"}
        with pytest.raises(TypeError):
            d.dependencies["c"] = "g:c:1"

    def test_frozen(self, descriptor):
        with pytest.raises(AttributeError):
            descriptor.name = "other"


class TestValidateDescriptor:
    def test_valid(self, descriptor):
        validate_descriptor(descriptor)

    @pytest.mark.parametrize(
        ("field", "value", "message"),
        [
            ("name", "  ", "name cannot be empty"),
            ("entry_point", "", "Main class name cannot be empty"),
            ("version", "", "version cannot be empty"),
            ("base_namespace", "", "namespace cannot be empty"),
            ("base_namespace", "com..example", "not a Java identifier"),
            ("base_namespace", "com.my-corp", "not a Java identifier"),
            ("java_release", "eleven", "java_release"),
        ],
    )
    def test_invalid(self, make_descriptor, field, value, message):
        with pytest.raises(ConfigError, match=message):
            validate_descriptor(make_descriptor(**{field: value}))


class TestBackend:
    def test_parse_case_insensitive(self):
        assert Backend.parse("Maven") is Backend.MAVEN

    def test_parse_unknown(self):
        with pytest.raises(ConfigError, match="Unsupported build_tool 'ant'"):
            Backend.parse("ant")


# ---------------------------------------------------------------------------
# parse_descriptor / load_descriptor
# ---------------------------------------------------------------------------


class TestParseDescriptor:
    def test_missing_project_table(self):
        with pytest.raises(ConfigError, match=r"\[project\]"):
            parse_descriptor({"dependencies": {}})

    def test_missing_required_key(self):
        with pytest.raises(ConfigError, match="main_class"):
            parse_descriptor({"project": {"name": "x", "version": "1", "base_namespace": "a"}})

    def test_use_shadow_alias(self):
        raw = {
            "project": {
                "name": "x",
                "version": "1",
                "main_class": "Main",
                "base_namespace": "a",
                "use_shadow": False,
            }
        }
        assert parse_descriptor(raw).features.fat_archive is False

    def test_features_table_wins_over_alias(self):
        raw = {
            "project": {
                "name": "x",
                "version": "1",
                "main_class": "Main",
                "base_namespace": "a",
                "use_shadow": False,
            },
            "features": {"fat_archive": True, "wrapper": False},
        }
        features = parse_descriptor(raw).features
        assert features == FeatureFlags(fat_archive=True, wrapper=False)

    def test_non_boolean_flag(self):
        raw = {
            "project": {"name": "x", "version": "1", "main_class": "M", "base_namespace": "a"},
            "features": {"wrapper": "yes"},
        }
        with pytest.raises(ConfigError, match="wrapper"):
            parse_descriptor(raw)


class TestLoadDescriptor:
    def test_minimal(self, tmp_path: Path):
        project = load_descriptor(_write_project(tmp_path))
        assert project.descriptor.name == "demo"
        assert project.source_root == tmp_path / "." / "src"
        assert project.resource_root is None
        assert project.workspace_root == tmp_path / "jarsmith_build"

    def test_full(self, tmp_path: Path):
        toml = _MINIMAL_TOML.replace('name = "demo"', 'name = "full"') + (
            'build_tool = "maven"\n'
            'maven_version = "3.9.9"\n'
            "\n[dependencies]\n"
            'guava = "com.google.guava:guava:32.1.2-jre"\n'
        )
        d = load_descriptor(_write_project(tmp_path, toml)).descriptor
        assert d.backend is Backend.MAVEN
        assert d.maven_version == "3.9.9"
        assert dict(d.dependencies) == {"guava": "com.google.guava:guava:32.1.2-jre"}

    def test_root_path_and_resources(self, tmp_path: Path):
        toml = _MINIMAL_TOML + 'root_path = "app"\n'
        _write_project(tmp_path, toml)
        (tmp_path / "app" / "resources").mkdir(parents=True)
        project = load_descriptor(tmp_path)
        assert project.source_root == tmp_path / "app" / "src"
        assert project.resource_root == tmp_path / "app" / "resources"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="jarsmith init"):
            load_descriptor(tmp_path)

    def test_invalid_toml(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_descriptor(_write_project(tmp_path, "[project\nname="))

    def test_empty_name_rejected(self, tmp_path: Path):
        toml = _MINIMAL_TOML.replace('name = "demo"', 'name = ""')
        with pytest.raises(ConfigError, match="name cannot be empty"):
            load_descriptor(_write_project(tmp_path, toml))

    def test_build_dir_env_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("JARSMITH_BUILD_DIR", "out")
        project = load_descriptor(_write_project(tmp_path))
        assert project.workspace_root == tmp_path / "out"

    def test_build_dir_from_dotenv(self, tmp_path: Path, monkeypatch):
        monkeypatch.delenv("JARSMITH_BUILD_DIR", raising=False)
        monkeypatch.chdir(tmp_path)
        _write_project(tmp_path)
        absolute = tmp_path / "elsewhere"
        (tmp_path / ".env").write_text(f"JARSMITH_BUILD_DIR={absolute}\n")
        try:
            project = load_descriptor(tmp_path)
        finally:
            os.environ.pop("JARSMITH_BUILD_DIR", None)
        assert project.workspace_root == absolute
