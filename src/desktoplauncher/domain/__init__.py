"""Domain layer for desktop launchers."""
