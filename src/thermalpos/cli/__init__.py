"""Command-line tools for thermalpos."""
