"""design-to-code: generate a source project from a design-tool export."""

__version__ = "0.1.0"
