"""Grade HTML files or URLs for the presence of CSS selectors."""

__version__ = "1.0.0"
