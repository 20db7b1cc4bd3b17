"""Simplified DES with ECB and CBC modes of operation over bit strings."""

__version__ = "0.1.0"