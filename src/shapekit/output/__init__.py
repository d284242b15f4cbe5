"""Output layer: renders ServiceResult as JSON, quiet, or Rich text."""
