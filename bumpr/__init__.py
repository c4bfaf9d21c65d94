"""Read, bump and write semantic versions kept in project files."""

__version__ = "0.1.0"

__all__ = ["detector", "sources", "version"]