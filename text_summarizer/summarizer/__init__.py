"""Summarization engine: extractive pipeline, remote strategy and orchestration."""
