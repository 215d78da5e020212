"""Domain layer — pure types, outcomes, and the vehicle state machine.

Domain modules must never import from infrastructure, services, or commands.
"""
