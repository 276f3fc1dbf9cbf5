"""create-quick-start: interactive JavaScript/TypeScript project skeleton generator."""

__version__ = "1.0.0"
