"""Package generated HTML API documentation as a Dash/Zeal docset."""

__version__ = "0.1.0"
