"""Feature packages for pathhelper."""
