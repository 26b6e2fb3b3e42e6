"""Core Layer — entities, errors, and boundary protocols. No IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Entities are immutable once parsed

Design Decisions:
    - Functional core separated from imperative shell: use cases in services/
      drive the IO through the protocols declared here
"""
