"""Persistence adapters implementing the core store port."""
