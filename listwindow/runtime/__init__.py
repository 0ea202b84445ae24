"""List-window runtime implementations."""
