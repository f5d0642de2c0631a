"""Abstract interfaces."""
