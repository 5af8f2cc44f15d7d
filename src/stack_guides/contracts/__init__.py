"""JSON-schema contracts for the published artifacts."""
