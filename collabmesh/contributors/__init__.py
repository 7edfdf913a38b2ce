"""Contributor registry — one profile per contributor identity."""
