"""Wins Tracker - log engineering wins and sync merged GitHub PRs."""

__version__ = "0.1.0"
