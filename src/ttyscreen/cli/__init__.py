"""Command-line interface and the interactive demo loop."""
