"""Core business logic layer.

Subpackages:
- labels: content density analysis, ingredient optimization and sheet layout
- production: per-meal label counts for a production day
"""
__all__ = ["labels", "production"]
