"""Core of a desktop notification daemon: notifications, modifiers, placement, history and themes."""

__version__ = "0.4.1"