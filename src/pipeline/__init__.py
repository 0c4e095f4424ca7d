"""Conversion pipeline.

This package exposes the chainable, memoizing pipeline that resolves
records into Markdown, HTML, or PDF output.
"""
