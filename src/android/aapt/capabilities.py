"""
Capability markers for aapt command builders.

Callers declare which build responsibility they need rather than depending on
a concrete builder, so an aapt2 builder can be swapped in later.
"""

from abc import ABC


class GenerateSourcesCommandBuilder(ABC):
    """Marker: builds commands that generate R source constants."""


class LinkCommandBuilder(ABC):
    """Marker: builds commands that produce a linked package."""
