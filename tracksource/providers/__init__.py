"""Concrete implementations of the tracksource interfaces."""
