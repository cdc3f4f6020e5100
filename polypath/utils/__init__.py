"""Small shared helpers for polypath."""
