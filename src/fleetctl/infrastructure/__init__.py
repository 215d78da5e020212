"""Infrastructure layer — the in-memory vehicle store.

Infrastructure may import from domain, never from services or commands.
"""
