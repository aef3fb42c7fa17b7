"""Shared helpers: tool discovery and persisted settings."""
