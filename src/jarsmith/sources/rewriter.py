"""Namespace rewriter — computes a unit's package and rewrites its declaration.

The target package is the base namespace followed by one component per
directory segment of the unit's relative path. A declaration is only
recognized at the start of the file, after an optional byte-order mark,
whitespace, comments and annotations; a ``package`` token anywhere else
(imports, strings, identifiers) is ignored.

Pure functions, no I/O.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..errors import MalformedSourceError

if TYPE_CHECKING:
    from .walker import CompilationUnit

logger = logging.getLogger(__name__)

# One whitespace char, a // line comment or a /* block */ comment (javadoc
# included). Repeat with * rather than \s+ inside the group.
_TRIVIA = r"(?:\s|//[^\n]*|/\*.*?\*/)"

_NAME = r"(?:[^\W\d]|\$)[\w$]*"

# @Name, @a.b.Name or @Name(...) with string literals but no nested parens
_ANNOTATION = (
    rf"@{_TRIVIA}*{_NAME}(?:{_TRIVIA}*\.{_TRIVIA}*{_NAME})*"
    r"""(?:\s*\((?:[^()"']|"(?:\\.|[^"\\])*"|'(?:\\.|[^'\\])*')*\))?"""
)

# An unterminated block comment is left unmatched.
_LEADING_TRIVIA_RE = re.compile(rf"\ufeff?(?:{_TRIVIA}|{_ANNOTATION})*", re.DOTALL)

_PACKAGE_KEYWORD_RE = re.compile(r"package(?![\w$])")

_DECLARATION_RE = re.compile(
    rf"package{_TRIVIA}*({_NAME}(?:{_TRIVIA}*\.{_TRIVIA}*{_NAME})*){_TRIVIA}*;",
    re.DOTALL,
)

_TRIVIA_RE = re.compile(_TRIVIA, re.DOTALL)

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

TERMINATOR = ";"


@dataclass(frozen=True)
class RewrittenUnit:
    """A compilation unit with its package declaration aligned to its location."""

    unit: CompilationUnit
    namespace: str
    content: str

    @property
    def package_path(self) -> tuple[str, ...]:
        return tuple(self.namespace.split("."))

    @property
    def file_name(self) -> str:
        return self.unit.file_name


def target_namespace(base_namespace: str, relative_path: tuple[str, ...]) -> str:
    """Namespace for a unit at relative_path (last segment is the file name)."""
    directories = relative_path[:-1]
    for segment in directories:
        if not _IDENTIFIER_RE.match(segment):
            # Passed through unchanged; the compiler will reject it later
            logger.warning(
                "Directory '%s' is not a valid package identifier (in %s)",
                segment,
                "/".join(relative_path),
            )
    return ".".join((base_namespace, *directories))


def _find_declaration(content: str, path: str) -> re.Match[str] | None:
    """Match the leading package statement, from ``package`` through its ';'."""
    start = _LEADING_TRIVIA_RE.match(content).end()
    if not _PACKAGE_KEYWORD_RE.match(content, start):
        return None
    declaration = _DECLARATION_RE.match(content, start)
    if declaration is None:
        if content.find(TERMINATOR, start) == -1:
            reason = "package declaration is missing its terminating ';'"
        else:
            reason = "package declaration is not a qualified name followed by ';'"
        raise MalformedSourceError(path, reason)
    return declaration


def parse_declared_namespace(content: str, path: str = "<memory>") -> str | None:
    """Namespace declared at the top of content, or None if there is none."""
    declaration = _find_declaration(content, path)
    if declaration is None:
        return None
    return _TRIVIA_RE.sub("", declaration.group(1))


def rewrite_unit(unit: CompilationUnit, base_namespace: str) -> RewrittenUnit:
    """Replace or prepend the package declaration of unit.

    An existing declaration is replaced in place: text before it (license
    headers, comments, annotations) and everything after its ';' are kept
    byte for byte. Without one, ``package <ns>;`` plus a newline is
    prepended, after a byte-order mark if the content starts with one.

    Raises:
        MalformedSourceError: If the declaration is not a qualified name
            terminated by ';'.
    """
    namespace = target_namespace(base_namespace, unit.relative_path)
    declaration = f"package {namespace}{TERMINATOR}"
    content = unit.raw_content

    existing = _find_declaration(content, unit.display_path)
    if existing is None:
        bom = "\ufeff" if content.startswith("\ufeff") else ""
        new_content = f"{bom}{declaration}\n{content[len(bom):]}"
    else:
        new_content = content[: existing.start()] + declaration + content[existing.end() :]

    logger.debug("Rewrote %s -> package %s", unit.display_path, namespace)
    return RewrittenUnit(unit=unit, namespace=namespace, content=new_content)
