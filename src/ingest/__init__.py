"""Timeline record collection.

This package drains upstream record sources into immutable,
ordered record sequences for the conversion pipeline.
"""
