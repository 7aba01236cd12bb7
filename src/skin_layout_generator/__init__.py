"""Generate paginated Android layout fragments from folders of skin images."""

__version__ = "0.1.0"
