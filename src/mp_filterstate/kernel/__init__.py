"""Kernel – errors and value predicates shared by every layer."""
