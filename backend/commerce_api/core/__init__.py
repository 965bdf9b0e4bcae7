"""Core Layer — pure domain logic, no IO, no HTTP, no framework imports.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Everything here is deterministic except id generation and the metrics lock

Design Decisions:
    - Functional core separated from imperative shell (services + routes)
"""
