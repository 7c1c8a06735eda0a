"""Add one-off and recurring events to a plain text calendar file, and search, sort and edit them."""

__version__ = "0.1.0"