"""Build descriptor generation — build.gradle / settings.gradle / pom.xml rendering.

Provides render_descriptor, dispatching to one renderer per backend, and
coordinate parsing for the dependency list.
"""
