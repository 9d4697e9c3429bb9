"""Local News - location aware news reader with an offline article cache."""

__version__ = "0.1.0"
