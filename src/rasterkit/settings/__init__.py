"""Scene settings: packaged defaults, pydantic schema and JSON store."""
