"""Request data, shared sessions, and buffered responses."""
