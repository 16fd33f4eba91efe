"""Refraction explorer backend: optics solver, ray geometry, materials and HTTP API."""
