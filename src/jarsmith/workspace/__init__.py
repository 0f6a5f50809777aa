"""Workspace materialization — backend directory skeleton, source placement, wrapper scripts.

Provides WorkspaceRoot (the explicit output location), LayoutBuilder for the
directory tree and rewritten sources, and WrapperProvisioner for the pinned
launcher scripts.
"""
