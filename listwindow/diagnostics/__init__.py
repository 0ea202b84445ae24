"""List-window diagnostics helpers."""
