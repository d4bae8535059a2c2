"""Utilities package for the Bakery Plan Client application."""
