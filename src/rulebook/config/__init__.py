"""Configuration layer: settings discovery, message overrides, logging setup."""
