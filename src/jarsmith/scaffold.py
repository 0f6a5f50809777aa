"""Project scaffolding — ``jarsmith init`` writes a starter jarsmith.toml and src/ tree."""

import logging
from pathlib import Path

from .errors import ConfigError
from .utils import PROJECT_FILE

logger = logging.getLogger(__name__)

_PROJECT_TOML = """\
[project]
name = "{name}"
version = "0.1.0"
main_class = "Main"
build_tool = "gradle"
base_namespace = "com.example"

[features]
# fat_archive = true
# wrapper = true

# [dependencies]
# guava = "com.google.guava:guava:32.1.2-jre"
"""

_MAIN_JAVA = """\
import com.example.classone.ClassOne;
import com.example.classtwo.ClassTwo;

public class Main {

    public static void main(String[] args) {
        ClassOne.oneMethod();
        ClassTwo.twoMethod();
    }
}
"""

_CLASS_JAVA = """\
public class {cls} {{

    public static void {method}() {{
        System.out.println("{cls} method");
    }}
}}
"""

# (relative path, content)
_SAMPLE_SOURCES = [
    (("Main.java",), _MAIN_JAVA),
    (
        ("classone", "ClassOne.java"),
        _CLASS_JAVA.format(cls="ClassOne", method="oneMethod"),
    ),
    (
        ("classtwo", "ClassTwo.java"),
        _CLASS_JAVA.format(cls="ClassTwo", method="twoMethod"),
    ),
]


def _project_name(project_dir: Path) -> str:
    name = project_dir.resolve().name.replace("-", "_").replace(" ", "_")
    return name or "my_project"


def init_project(project_dir: Path) -> list[Path]:
    """Create jarsmith.toml and a sample src/ tree in project_dir.

    Returns:
        The files written.

    Raises:
        ConfigError: If jarsmith.toml or src/ already exists.
    """
    toml_path = project_dir / PROJECT_FILE
    src_dir = project_dir / "src"
    if toml_path.exists():
        raise ConfigError(f"`{toml_path}` already exists.")
    if src_dir.exists():
        raise ConfigError(f"`{src_dir}` directory already exists.")

    project_dir.mkdir(parents=True, exist_ok=True)
    toml_path.write_text(
        _PROJECT_TOML.format(name=_project_name(project_dir)), encoding="utf-8"
    )
    written = [toml_path]

    for segments, content in _SAMPLE_SOURCES:
        dest = src_dir.joinpath(*segments)
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(content, encoding="utf-8")
        written.append(dest)

    logger.info("Initialized a new jarsmith project in %s", project_dir)
    return written
