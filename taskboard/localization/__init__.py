"""Localization bundles and helpers."""
