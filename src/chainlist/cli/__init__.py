"""CLI layer — argument parsing, user interaction, and error boundary.

This package is the outermost layer.  It may import from ``core``, but
``core`` never imports from ``cli``.
"""
