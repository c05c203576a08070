"""Command-line layer for the ``fizzbuzz`` command.

Argument parsing, help text and command execution. The Click command
itself lives in :mod:`fizzbuzz.cli`.
"""
