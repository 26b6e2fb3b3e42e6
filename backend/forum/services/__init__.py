"""Services Layer — one use case per business action.

Invariants:
    - Use cases depend only on core/ protocols, injected at construction
    - Use cases never catch: errors propagate to the API layer untouched
    - At most one persistence write per execute() call
"""
