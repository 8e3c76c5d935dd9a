"""Product catalog management: validated CRUD over a relational store."""

__version__ = "1.0.0"
