"""CRUD modules."""
