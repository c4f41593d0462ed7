"""Building blocks for writing PDF files: object model, header, graphics state, functions, metadata and standard security values."""

__version__ = "0.1.0"