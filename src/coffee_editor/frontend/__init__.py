"""Textual frontend for the coffee editor."""
