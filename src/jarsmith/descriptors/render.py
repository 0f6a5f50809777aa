"""Descriptor rendering — ProjectDescriptor → backend build files.

Each backend has one DescriptorRenderer that fills the templates in
templates.py. Rendering is a pure function of the descriptor: same input,
byte-identical output, regardless of the dependency map's iteration order.

Key entities:
  - DescriptorRenderer: base class, one subclass per Backend.
  - render_descriptor(): descriptor → {relative path: file text}.
  - write_descriptors(): render and write into a WorkspaceRoot.
"""

from __future__ import annotations

import abc
import logging
from pathlib import Path
from xml.sax.saxutils import escape

from ..descriptor import Backend, ProjectDescriptor
from ..workspace.layout import WorkspaceRoot, write_text
from . import templates
from .coordinates import Coordinate, resolve_dependencies

logger = logging.getLogger(__name__)


def _groovy_quote(value: str) -> str:
    """Escape a value for a single-quoted Groovy string."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


class DescriptorRenderer(abc.ABC):
    """Renders the build files of one backend."""

    backend: Backend

    def render(self, descriptor: ProjectDescriptor) -> dict[str, str]:
        """Return {project-relative path: content} for every build file."""
        coordinates = resolve_dependencies(descriptor.dependencies)
        skipped = len(descriptor.dependencies) - len(coordinates)
        if skipped:
            logger.debug("Skipped %d malformed dependency coordinate(s)", skipped)
        return self._render(descriptor, coordinates)

    @abc.abstractmethod
    def _render(
        self, descriptor: ProjectDescriptor, coordinates: list[Coordinate]
    ) -> dict[str, str]:
        """Fill the backend templates."""


class GradleRenderer(DescriptorRenderer):
    backend = Backend.GRADLE

    def _render(
        self, descriptor: ProjectDescriptor, coordinates: list[Coordinate]
    ) -> dict[str, str]:
        q = _groovy_quote
        plugins = list(templates.GRADLE_BASE_PLUGINS)
        fat_archive_block = ""
        if descriptor.features.fat_archive:
            plugins.append(
                templates.GRADLE_SHADOW_PLUGIN.format(
                    version=q(descriptor.shadow_plugin_version)
                )
            )
            fat_archive_block = templates.GRADLE_SHADOW_BLOCK

        dependencies = "".join(
            templates.GRADLE_DEPENDENCY.format(coordinate=q(str(c))) + "\n"
            for c in coordinates
        )

        build = templates.GRADLE_BUILD.format(
            plugins="\n".join(f"    {p}" for p in plugins),
            group=q(descriptor.name),
            version=q(descriptor.version),
            entry_point=q(descriptor.entry_point_fqn),
            java_release=descriptor.java_release,
            dependencies=dependencies,
            test_dependencies=templates.GRADLE_TEST_DEPENDENCIES,
            test_block=templates.GRADLE_TEST_BLOCK,
            fat_archive_block=fat_archive_block,
        )
        return {
            "build.gradle": build,
            "settings.gradle": templates.GRADLE_SETTINGS.format(name=q(descriptor.name)),
            "gradle.properties": templates.GRADLE_PROPERTIES,
        }


class MavenRenderer(DescriptorRenderer):
    backend = Backend.MAVEN

    def _render(
        self, descriptor: ProjectDescriptor, coordinates: list[Coordinate]
    ) -> dict[str, str]:
        name = escape(descriptor.name)
        version = escape(descriptor.version)
        entry_point = escape(descriptor.entry_point_fqn)

        fat_archive_block = ""
        if descriptor.features.fat_archive:
            fat_archive_block = templates.MAVEN_SHADE_BLOCK.format(
                name=name, version=version, entry_point=entry_point
            )

        dependencies = "".join(
            templates.MAVEN_DEPENDENCY.format(
                group=escape(c.group),
                artifact=escape(c.artifact),
                version=escape(c.version),
            )
            + "\n"
            for c in coordinates
        )

        pom = templates.MAVEN_POM.format(
            group=name,
            name=name,
            version=version,
            java_release=escape(descriptor.java_release),
            entry_point=entry_point,
            dependencies=dependencies,
            test_dependencies=templates.MAVEN_TEST_DEPENDENCIES,
            test_block=templates.MAVEN_TEST_BLOCK,
            fat_archive_block=fat_archive_block,
        )
        return {"pom.xml": pom}


_RENDERERS: dict[Backend, DescriptorRenderer] = {
    r.backend: r for r in (GradleRenderer(), MavenRenderer())
}


def get_renderer(backend: Backend) -> DescriptorRenderer:
    return _RENDERERS[backend]


def render_descriptor(descriptor: ProjectDescriptor) -> dict[str, str]:
    """Render every build file for the descriptor's backend."""
    return get_renderer(descriptor.backend).render(descriptor)


def write_descriptors(
    workspace: WorkspaceRoot, descriptor: ProjectDescriptor
) -> list[Path]:
    """Render and write the build files under the backend project dir.

    Existing files are overwritten; descriptors are never patched in place.
    """
    written: list[Path] = []
    for relative, content in render_descriptor(descriptor).items():
        dest = workspace.project_dir / relative
        dest.parent.mkdir(parents=True, exist_ok=True)
        write_text(dest, content)
        written.append(dest)
        logger.info("Generated %s", dest)
    return written
