"""Configuration: settings models, shapekit.toml discovery, and logging."""
