"""Core player data, enums and sampling."""
