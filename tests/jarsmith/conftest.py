"""Shared fixtures for jarsmith tests: descriptors and a throwaway source tree."""

from collections.abc import Callable
from pathlib import Path

import pytest

from jarsmith.descriptor import Backend, ProjectDescriptor

_DEFAULTS = {
    "name": "demo",
    "version": "1.0.0",
    "entry_point": "Main",
    "base_namespace": "com.example",
}


@pytest.fixture
def make_descriptor() -> Callable[..., ProjectDescriptor]:
    """Factory for valid descriptors; keyword overrides replace defaults."""

    def _make(**overrides) -> ProjectDescriptor:
        return ProjectDescriptor(**{**_DEFAULTS, **overrides})

    return _make


@pytest.fixture
def descriptor(make_descriptor) -> ProjectDescriptor:
    return make_descriptor()


@pytest.fixture
def maven_descriptor(make_descriptor) -> ProjectDescriptor:
    return make_descriptor(backend=Backend.MAVEN)


@pytest.fixture
def source_root(tmp_path: Path) -> Path:
    """The sample tree `jarsmith init` creates, one unit already mis-packaged."""
    root = tmp_path / "src"
    (root / "classone").mkdir(parents=True)
    (root / "classtwo").mkdir()
    (root / "Main.java").write_text("public class Main {}\n")
    (root / "classone" / "ClassOne.java").write_text(
        "public class ClassOne {\n    public static void oneMethod() {}\n}\n"
    )
    (root / "classtwo" / "ClassTwo.java").write_text(
        "package wrong.place;\n\npublic class ClassTwo {}\n"
    )
    return root
