"""Boundary labeling: non-overlapping label bands with L-shaped leaders."""
