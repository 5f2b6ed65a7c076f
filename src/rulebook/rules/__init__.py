"""Rule layer: combinators and the standard rule set.

Rules may import from core and domain. They must never import from output.
"""
