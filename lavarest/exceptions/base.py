from __future__ import annotations


class LavaRestException(Exception):
    """Base exception for errors in the library"""
