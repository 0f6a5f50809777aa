"""Project descriptor — reads jarsmith.toml + .env to produce a ProjectDescriptor.

The descriptor is the only input the descriptor generator and the wrapper
provisioner see; the source walker additionally gets the source root resolved
here.

Key entities:
  - ProjectDescriptor: frozen dataclass with the validated project metadata.
  - FeatureFlags: optional descriptor blocks (fat archive, wrapper).
  - load_descriptor(): parse .env + jarsmith.toml → LoadedProject.
"""

from __future__ import annotations

import enum
import logging
import re
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from dotenv import load_dotenv

from .errors import ConfigError
from .utils import PROJECT_FILE, build_dir

logger = logging.getLogger(__name__)

_NAMESPACE_COMPONENT_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class Backend(enum.Enum):
    """Build tool a workspace is materialized for."""

    GRADLE = "gradle"
    MAVEN = "maven"

    @classmethod
    def parse(cls, value: str) -> Backend:
        try:
            return cls(value.strip().lower())
        except ValueError:
            supported = ", ".join(b.value for b in cls)
            raise ConfigError(
                f"Unsupported build_tool '{value}' (expected one of: {supported})"
            ) from None


@dataclass(frozen=True)
class FeatureFlags:
    """Named booleans toggling optional descriptor blocks.

    fat_archive: include the shadow/shade packaging plugin and its
        post-processing block. Default on.
    wrapper: emit pinned wrapper launchers and their properties. Default on.
    """

    fat_archive: bool = True
    wrapper: bool = True


# ---------------------------------------------------------------------------
# ProjectDescriptor
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ProjectDescriptor:
    """Validated project metadata, immutable for the whole run."""

    name: str
    version: str
    entry_point: str
    base_namespace: str
    dependencies: Mapping[str, str] = field(default_factory=dict)
    backend: Backend = Backend.GRADLE
    features: FeatureFlags = field(default_factory=FeatureFlags)

    # Pinned tool versions
    gradle_version: str = "8.4"
    maven_version: str = "3.9.6"
    shadow_plugin_version: str = "7.1.2"
    java_release: str = "11"

    def __post_init__(self) -> None:
        # Freeze the dependency map so the descriptor is immutable end to end
        object.__setattr__(
            self, "dependencies", MappingProxyType(dict(self.dependencies))
        )

    @property
    def entry_point_fqn(self) -> str:
        return f"{self.base_namespace}.{self.entry_point}"

    @property
    def namespace_components(self) -> tuple[str, ...]:
        return tuple(self.base_namespace.split("."))

    @property
    def archive_name(self) -> str:
        """Canonical archive file name: ``name-version.jar``.

        The fat-archive blocks reset the classifier, so the shadow/shade
        output lands under this name too (never ``-all``).
        """
        return f"{self.name}-{self.version}.jar"


def validate_descriptor(descriptor: ProjectDescriptor) -> None:
    """Raise ConfigError if the descriptor cannot be materialized."""
    if not descriptor.name.strip():
        raise ConfigError("Project name cannot be empty.")
    if not descriptor.entry_point.strip():
        raise ConfigError("Main class name cannot be empty.")
    if not descriptor.version.strip():
        raise ConfigError("Project version cannot be empty.")
    if not descriptor.base_namespace.strip():
        raise ConfigError("Base namespace cannot be empty.")
    if not descriptor.java_release.isdigit():
        raise ConfigError(
            f"java_release must be a number, got '{descriptor.java_release}'."
        )
    for component in descriptor.namespace_components:
        if not _NAMESPACE_COMPONENT_RE.match(component):
            raise ConfigError(
                f"Invalid base namespace '{descriptor.base_namespace}': "
                f"component '{component}' is not a Java identifier."
            )


# ---------------------------------------------------------------------------
# load_descriptor
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LoadedProject:
    """A descriptor plus the filesystem locations resolved alongside it."""

    descriptor: ProjectDescriptor
    project_dir: Path
    source_root: Path
    resource_root: Path | None
    workspace_root: Path


def load_descriptor(project_dir: Path | None = None) -> LoadedProject:
    """Read .env + jarsmith.toml and return the resolved project.

    Args:
        project_dir: Directory holding jarsmith.toml. Defaults to the cwd.

    Raises:
        ConfigError: If the file is missing, not valid TOML, or fails
            validation.
    """
    if project_dir is None:
        project_dir = Path.cwd()

    # Load .env files (local cwd first, then project_dir)
    local_env = Path(".env")
    project_env = project_dir / ".env"
    if local_env.is_file():
        load_dotenv(local_env)
    if project_env.is_file() and project_env.resolve() != local_env.resolve():
        load_dotenv(project_env)

    toml_path = project_dir / PROJECT_FILE
    if not toml_path.is_file():
        raise ConfigError(
            f"Missing `{toml_path}`. Run 'jarsmith init' to create a new project."
        )

    try:
        with open(toml_path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML format in `{toml_path}`: {e}") from e

    descriptor = parse_descriptor(raw)
    validate_descriptor(descriptor)

    project_section = raw.get("project", {})
    root = project_dir / str(project_section.get("root_path", "."))
    resource_root = root / "resources"

    loaded = LoadedProject(
        descriptor=descriptor,
        project_dir=project_dir,
        source_root=root / "src",
        resource_root=resource_root if resource_root.is_dir() else None,
        workspace_root=build_dir(project_dir),
    )
    logger.debug("Loaded descriptor for %s from %s", descriptor.name, toml_path)
    return loaded


def parse_descriptor(raw: dict) -> ProjectDescriptor:
    """Build a ProjectDescriptor from an already-parsed TOML document."""
    project = raw.get("project")
    if not isinstance(project, dict):
        raise ConfigError(f"{PROJECT_FILE} must contain a [project] table.")

    def _str(key: str, default: str | None = None) -> str:
        value = project.get(key, default)
        if value is None:
            raise ConfigError(f"[project] is missing required key '{key}'.")
        return str(value)

    dependencies = raw.get("dependencies", {})
    if not isinstance(dependencies, dict):
        raise ConfigError("[dependencies] must be a table of name = coordinate.")

    return ProjectDescriptor(
        name=_str("name"),
        version=_str("version"),
        entry_point=_str("main_class"),
        base_namespace=_str("base_namespace"),
        dependencies={str(k): str(v) for k, v in dependencies.items()},
        backend=Backend.parse(_str("build_tool", Backend.GRADLE.value)),
        features=_parse_features(project, raw.get("features", {})),
        gradle_version=_str("gradle_version", "8.4"),
        maven_version=_str("maven_version", "3.9.6"),
        shadow_plugin_version=_str("shadow_plugin_version", "7.1.2"),
        java_release=_str("java_release", "11"),
    )


def _parse_features(project: dict, features: dict) -> FeatureFlags:
    """[features] > legacy [project] keys > defaults."""
    defaults = FeatureFlags()

    def _flag(key: str, legacy_key: str | None, default: bool) -> bool:
        if key in features:
            value = features[key]
        elif legacy_key and legacy_key in project:
            value = project[legacy_key]
        else:
            return default
        if not isinstance(value, bool):
            raise ConfigError(f"Feature flag '{key}' must be true or false.")
        return value

    return FeatureFlags(
        fat_archive=_flag("fat_archive", "use_shadow", defaults.fat_archive),
        wrapper=_flag("wrapper", None, defaults.wrapper),
    )
