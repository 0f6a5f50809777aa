"""Root conftest — clears jarsmith env vars BEFORE any test loads a project.

load_descriptor() and the CLI read JARSMITH_BUILD_DIR / JARSMITH_LOG_LEVEL
from the environment, so values from the developer's shell must not leak
into tests.
"""

import os

os.environ.pop("JARSMITH_BUILD_DIR", None)
os.environ.pop("JARSMITH_LOG_LEVEL", None)
