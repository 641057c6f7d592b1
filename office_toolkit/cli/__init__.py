"""Command-line interfaces for office toolkit."""
