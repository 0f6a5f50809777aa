"""Error taxonomy for a materialization run.

Filesystem failures are not wrapped: the builtin ``OSError`` hierarchy
(FileNotFoundError, NotADirectoryError, FileExistsError, PermissionError)
propagates as-is. Everything raised here is fatal to the current run.
"""


class JarsmithError(Exception):
    """Base class for jarsmith-specific failures."""


class ConfigError(JarsmithError, ValueError):
    """Project descriptor is missing, unparseable or fails validation."""


class MalformedSourceError(JarsmithError):
    """A source unit cannot be decoded or its ``package`` declaration parsed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
