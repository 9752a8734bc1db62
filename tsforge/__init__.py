"""tsforge -- generate a ready-to-build TypeScript package skeleton."""

__version__ = "0.1.0"
