"""Recipe catalog service backed by Notion databases."""

__version__ = "0.1.0"
