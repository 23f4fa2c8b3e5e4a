"""Concrete summarization strategies."""
