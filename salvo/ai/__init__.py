"""Placement, targeting, scanning and shot selection."""
