"""
Persistence adapters.

Key-value stores (memory, JSON file, SQL table) live next to the plant adapter
that serializes the whole collection under a single key. Services depend on
PlantStorage rather than touching a store directly.
"""
