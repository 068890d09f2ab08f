"""create-gsp -- scaffold React applications from GSP templates."""

__version__ = "1.1.0"
