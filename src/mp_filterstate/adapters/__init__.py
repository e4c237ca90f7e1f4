"""Adapters – concrete implementations of the storage port."""
