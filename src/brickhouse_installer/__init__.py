"""Scaffolding for new Brickhouse applications."""
