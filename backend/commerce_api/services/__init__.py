"""Services Layer — business handlers behind the HTTP routes.

Invariants:
    - Services receive their collaborators (metrics store, provider client) explicitly
    - Services raise CommerceError subclasses; routes never build error payloads

Design Decisions:
    - CommerceService is synchronous (pure CPU work); SubscriptionService is async (network)
"""
