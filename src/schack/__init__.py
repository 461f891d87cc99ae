"""Schack — a PyQt6 chess front-end over a pluggable rules engine."""

__version__ = "0.1.0"
