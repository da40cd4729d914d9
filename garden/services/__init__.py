"""
High-level use cases for Garden Monitor.

The plant registry owns the collection and its mutations; plant_display turns
plants into view models. Routers and scripts call these services instead of
touching the storage adapters directly.
"""
