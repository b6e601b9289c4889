"""Core path operations and settings.

The path modules (components, extensions, wildcard, relative, dedupe)
are side-effect free functions of their arguments and never touch the
filesystem. Configuration loading lives here too.
"""
