"""Raster helpers and page image I/O."""
