"""Inspect the UTF-8, UTF-16 and Unicode codes of text and convert text files between UTF-8 and GBK."""

__version__ = "0.1.0"