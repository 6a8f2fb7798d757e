"""Command-line interface for dyadic-trust."""
