"""ponysay -- render a pony with a speech balloon."""

__version__ = '0.1.0'
