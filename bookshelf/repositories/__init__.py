"""
Persistence adapters.

These modules encapsulate how data is stored and retrieved (today a JSON file).
Services depend on the storage object instead of touching the file directly.
"""
