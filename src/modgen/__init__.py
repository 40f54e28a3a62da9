"""modgen -- scaffolds minimal buildable Fabric mod projects."""

__version__ = "0.1.0"
