"""Core, UI-agnostic implementation of the catalog index."""
