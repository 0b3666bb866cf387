"""Version 1 of the album store HTTP API."""
