"""Utility helpers for legaloutline."""
