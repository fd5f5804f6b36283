"""Position tracking primitives."""
