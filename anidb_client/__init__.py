"""Async client for the AniDB HTTP API and dataclasses for its anime documents."""

__version__ = "0.1.1"