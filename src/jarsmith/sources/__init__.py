"""Source pipeline — compilation unit discovery and package declaration rewriting.

Provides SourceTree for walking the flat ``src/`` tree and rewrite_unit for
aligning each unit's ``package`` statement with its target location.
"""
