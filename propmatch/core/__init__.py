"""
Core business logic modules for PropMatch.

Submodules:
- matching: Client-property matching engine
- inventory: Search filters over the client book and property inventory
"""
