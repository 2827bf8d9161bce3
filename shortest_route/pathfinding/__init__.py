"""Shortest-path algorithms over a loaded Graph."""
