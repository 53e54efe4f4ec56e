"""Video review analyzer: Gemini video critique parsed into structured scores."""
