"""jarsmith - materializes Gradle/Maven workspaces from a flat Java source tree.

Relocates ``*.java`` files into package directories derived from a base
namespace, rewrites their ``package`` declarations, and renders the build
descriptors and wrapper scripts the external build tool needs.

Package entry point. Exports the version string only; functional modules are
imported by main.py and by callers directly.
"""

__version__ = "0.1.0"
