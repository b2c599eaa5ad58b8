"""Command-line interface for the Duolingo client."""
