"""linkgrab — fetch a page, extract its metadata and render it as a link."""

__version__ = "0.3.0"
