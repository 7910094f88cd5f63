"""Bundled widgets, resolvable by the default resolver as ``widgets/<name>``."""
