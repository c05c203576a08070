"""Service layer: the range engine and convenience entry points."""
