"""Exceptions raised while decoding documents into mappings."""

from __future__ import annotations


class MalformedInputError(ValueError):
    """The document could not be decoded into a mapping."""
