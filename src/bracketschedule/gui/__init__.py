"""PyQt6 desktop window for Bracket Schedule."""
