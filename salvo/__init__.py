"""Sweep-and-follow battleship contest agent."""
