"""DraftDesk: topic-to-document drafting with a navigable outline."""

__version__ = "0.1.0"
