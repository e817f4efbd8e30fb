"""User interface packages."""
