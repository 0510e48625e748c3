"""Core release checking and checksum resolution."""
