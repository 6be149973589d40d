"""Utility helpers for aidocs."""
