"""Requisition registry — one published requisition per sponsor identity."""
