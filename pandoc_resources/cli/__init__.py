"""Command-line interface for pandoc-resources."""
