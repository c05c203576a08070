"""Domain layer: rule and result models, validation, evaluators.

Pure logic with no I/O. Everything here is importable without Click.
"""
