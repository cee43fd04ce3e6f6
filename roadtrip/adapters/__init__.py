"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Road map storage (CSV files)
- Caching systems (in-memory, null)
"""
