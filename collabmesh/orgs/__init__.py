"""Organization registry — one profile per owner identity."""
