"""Domain layer: shapes, geometry errors, and validation rules.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
