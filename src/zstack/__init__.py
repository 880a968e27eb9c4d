"""zstack: z-index stacking topology extracted from CSS and HTML."""

__version__ = "0.1.0"
