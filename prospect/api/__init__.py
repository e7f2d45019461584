"""HTTP API exposing player view models."""
