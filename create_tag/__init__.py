"""create-tag: create git tags with naming, versioning and temporary-tag cleanup policy."""

__version__ = "0.1.0"
