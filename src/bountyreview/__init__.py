"""Bounty submission review engine with commitment-based attestations."""

__version__ = "0.1.0"
