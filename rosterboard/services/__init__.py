"""Services Layer — roster store, command dispatch and the interaction router.

Invariants:
    - Every roster mutation goes through RosterStore.transaction()
    - Command dispatch uses explicit dict mapping (no auto-discovery)

Design Decisions:
    - Services orchestrate IO around pure core calls; they never format wire payloads
"""
