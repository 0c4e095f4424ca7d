"""Record formatters.

This package renders record sequences as Markdown and HTML, including
field-projecting formatters for JSON payloads.
"""
