"""Core normalization logic shared by provider parsers."""
