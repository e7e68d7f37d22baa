"""Async client, models and URI builders for the Bitbucket Server REST API."""

__version__ = "0.1.0"