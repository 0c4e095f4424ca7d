"""Paginated document rendering.

This package defines the rendering engine contract and the default
WeasyPrint engine that turns HTML into PDF bytes.
"""
