"""Password strength scoring by estimated entropy, and validation against a minimum."""

__version__ = "1.0.0"