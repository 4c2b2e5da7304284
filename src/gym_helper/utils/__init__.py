"""Shared helpers for gym-helper."""
