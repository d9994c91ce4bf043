"""Robots built on the medlab SDK."""
