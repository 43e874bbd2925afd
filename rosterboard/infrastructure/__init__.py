"""Infrastructure Layer — storage backends and logging setup.

Invariants:
    - Infrastructure depends on core types, never on services/ or api/
    - Every storage failure is mapped to StorageError

Design Decisions:
    - Backends implement core's RosterRepository protocol (ADR: swap without touching services)
"""
