"""Find and remove node_modules directories under a project tree."""

__version__ = "0.1.0"
