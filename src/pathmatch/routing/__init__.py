"""Routing patterns: template parsing and anchored path matching.

Templates are parsed once into immutable token sequences; matching is
stateless and compiles each sequence into a single anchored pattern.
"""
