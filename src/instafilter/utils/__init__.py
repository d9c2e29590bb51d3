"""Utility helpers shared by the Instafilter packages."""
