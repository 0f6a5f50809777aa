"""Source tree walker — enumerates compilation units under a source root.

A SourceTree is a lazy, restartable iterable: every ``iter()`` re-walks the
directory and yields one CompilationUnit per ``*.java`` file at any depth.
Consumers must not depend on traversal order; each unit is self-contained.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from ..errors import MalformedSourceError
from .rewriter import parse_declared_namespace

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".java"


@dataclass(frozen=True)
class CompilationUnit:
    """One source file discovered under the source root."""

    relative_path: tuple[str, ...]  # segments from the source root, last = file name
    raw_content: str

    @property
    def file_name(self) -> str:
        return self.relative_path[-1]

    @property
    def directory_segments(self) -> tuple[str, ...]:
        return self.relative_path[:-1]

    @property
    def display_path(self) -> str:
        return "/".join(self.relative_path)

    @property
    def declared_namespace(self) -> str | None:
        """Namespace currently declared in the content, if any.

        Raises MalformedSourceError for an unparseable declaration.
        """
        return parse_declared_namespace(self.raw_content, self.display_path)


def read_source(path: Path) -> str:
    """Read a source file without newline translation.

    A leading UTF-8 byte-order mark is dropped.
    """
    with open(path, encoding="utf-8-sig", newline="") as f:
        return f.read()


def check_root(root: Path) -> None:
    """Raise FileNotFoundError or NotADirectoryError unless root is a directory."""
    if not root.exists():
        raise FileNotFoundError(f"Source directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Source root is not a directory: {root}")


def _iter_files(directory: Path, prefix: tuple[str, ...]) -> Iterator[tuple[tuple[str, ...], Path]]:
    # Sorted for stable logs only; callers must not depend on the order
    for entry in sorted(directory.iterdir()):
        segments = (*prefix, entry.name)
        if entry.is_dir():
            if entry.name.startswith("."):
                continue
            yield from _iter_files(entry, segments)
        elif entry.is_file():
            yield segments, entry


class SourceTree:
    """Restartable view over the ``*.java`` files below a root directory."""

    def __init__(self, root: Path, suffix: str = SOURCE_SUFFIX) -> None:
        self.root = root
        self.suffix = suffix

    def __iter__(self) -> Iterator[CompilationUnit]:
        check_root(self.root)
        return self._walk()

    def _walk(self) -> Iterator[CompilationUnit]:
        for segments, path in _iter_files(self.root, ()):
            if path.suffix != self.suffix:
                continue
            display = "/".join(segments)
            logger.debug("Discovered source: %s", display)
            try:
                content = read_source(path)
            except UnicodeDecodeError as e:
                raise MalformedSourceError(display, f"not valid UTF-8 ({e.reason})") from e
            yield CompilationUnit(relative_path=segments, raw_content=content)


def iter_resources(root: Path) -> Iterator[tuple[tuple[str, ...], Path]]:
    """Yield (relative_segments, path) for every non-source file under root."""
    check_root(root)
    return (
        (segments, path)
        for segments, path in _iter_files(root, ())
        if path.suffix != SOURCE_SUFFIX
    )
