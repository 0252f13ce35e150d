"""Service modules exposed through the API."""
