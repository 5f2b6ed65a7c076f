"""Engine layer: evaluation loop and traversal of records, sequences, mappings.

The engine may import from domain and config (message templates only).
It must never import from rules or output.
"""
