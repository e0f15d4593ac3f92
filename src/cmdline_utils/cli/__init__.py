"""CLI layer: the ``cmdline-utils`` diagnostics command and error boundary.

This package is the outermost layer.  It may import from every other
layer, but no other layer may import from ``cli``.
"""
