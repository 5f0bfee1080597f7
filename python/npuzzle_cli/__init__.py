"""Command-line frontends for the puzzle solver."""
