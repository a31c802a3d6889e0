"""Usuarios API - in-memory user CRUD over HTTP."""

__version__ = "0.1.0"
