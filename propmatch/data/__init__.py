"""
Data layer for PropMatch.

Contains the record models, form validation and the in-memory
application state that the CLI and views work against.
"""
