"""Infrastructure Layer — database, repositories, security adapters, logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every adapter satisfies a Protocol from core/repository_protocols.py
"""
