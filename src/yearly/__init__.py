"""Annually repeating dates and a catalog of named holidays."""
