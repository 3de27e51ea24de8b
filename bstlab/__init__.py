"""Unbalanced binary search trees over integers and Wi-Fi router records, with console programs."""

__version__ = "1.0.0"