"""Mini Text Summarizer: extractive-first summaries with an optional LLM path."""

__version__ = "1.0.0"
