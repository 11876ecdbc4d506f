"""Write operations (CQRS commands) grouped by entity."""
