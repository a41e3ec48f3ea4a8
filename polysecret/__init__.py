"""Recover Shamir secrets from shares written in arbitrary bases."""

__version__ = "0.1.0"
