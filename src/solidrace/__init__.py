"""Toy race simulation demonstrating SOLID object-oriented design."""
