"""Materialization — turns a descriptor and a source tree into a build-ready workspace.

Runs two phases into the same workspace root, one after the other:
  1. Sources: walk src/, rewrite each unit's package, place it by package.
  2. Configuration: render build descriptors, provision the wrapper.

The phases never write the same path. A failure anywhere aborts the run and
leaves already-written files in place; callers should treat the workspace as
unusable and re-materialize.

Key entry point: materialize().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .descriptor import ProjectDescriptor, validate_descriptor
from .descriptors.render import write_descriptors
from .sources.rewriter import rewrite_unit
from .sources.walker import SourceTree, check_root
from .workspace.layout import LayoutBuilder, WorkspaceRoot
from .workspace.wrapper import WrapperProvisioner

logger = logging.getLogger(__name__)


@dataclass
class MaterializeResult:
    """Everything a run wrote, grouped by phase."""

    workspace: WorkspaceRoot
    archive_path: Path
    sources: list[Path] = field(default_factory=list)
    resources: list[Path] = field(default_factory=list)
    descriptors: list[Path] = field(default_factory=list)
    wrapper: list[Path] = field(default_factory=list)

    @property
    def project_dir(self) -> Path:
        return self.workspace.project_dir


def materialize(
    descriptor: ProjectDescriptor,
    source_root: Path,
    workspace_root: Path,
    resource_root: Path | None = None,
) -> MaterializeResult:
    """Produce a populated workspace for descriptor.backend.

    Args:
        descriptor: Validated project metadata.
        source_root: Flat source tree; directories become package components.
        workspace_root: Output root; the backend project lands in a subdir.
        resource_root: Optional tree copied verbatim to src/main/resources.

    Raises:
        ConfigError: If the descriptor fails validation (nothing written).
        MalformedSourceError: If a unit is not UTF-8 or its package
            statement cannot be parsed.
        OSError: On any filesystem failure. A missing or non-directory
            source or resource root is reported before anything is written.
    """
    validate_descriptor(descriptor)
    check_root(source_root)
    if resource_root is not None:
        check_root(resource_root)

    workspace = WorkspaceRoot(root=workspace_root, backend=descriptor.backend)
    result = MaterializeResult(
        workspace=workspace,
        archive_path=workspace.output_dir() / descriptor.archive_name,
    )
    layout = LayoutBuilder(workspace)
    layout.init_skeleton()
    logger.info(
        "Materializing %s (%s) into %s",
        descriptor.name,
        descriptor.backend.value,
        workspace.project_dir,
    )

    # Phase 1: sources
    for unit in SourceTree(source_root):
        rewritten = rewrite_unit(unit, descriptor.base_namespace)
        result.sources.append(layout.place(rewritten))
    if not result.sources:
        logger.warning("No source files found under %s", source_root)
    else:
        logger.info("Placed %d source file(s)", len(result.sources))

    if resource_root is not None:
        result.resources = layout.copy_resources(resource_root)

    # Phase 2: configuration
    result.descriptors = write_descriptors(workspace, descriptor)
    result.wrapper = WrapperProvisioner(workspace).provision(descriptor)

    return result
