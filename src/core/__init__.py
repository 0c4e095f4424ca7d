"""Shared core models and runtime services.

This package holds errors, typed models, configuration, logging, and
the deferred computation primitive used by every other layer.
"""
