"""Rendering Layer — string-built HTML for the shared layout and page fragments.

Invariants:
    - Every dynamic value passes through html.escape before interpolation
    - Fragments are trusted markup once built; the layout never re-escapes them

Design Decisions:
    - f-strings over a template engine: a handful of fixed pages, no user templates
"""
