"""InspireAI - AI content idea generator."""
