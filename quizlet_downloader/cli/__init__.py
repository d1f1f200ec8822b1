"""Command-line interface for Quizlet Downloader."""

from .main import cli, main

__all__ = ["cli", "main"]
