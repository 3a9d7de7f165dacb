"""Domain types (person record, key parsing) and the error taxonomy."""
