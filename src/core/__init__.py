"""Core configuration and logging for InspireAI."""
