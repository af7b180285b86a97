"""Chess mistake trainer: review AI-flagged mistakes on an interactive board."""

__version__ = "0.1.0"
