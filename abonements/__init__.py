"""Keep a list of club memberships and store it as CSV."""

__version__ = "0.1.0"
__all__ = ["abonement", "model", "validation", "cli"]