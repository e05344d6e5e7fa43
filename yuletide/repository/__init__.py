"""Repository layer: SQL helpers over a sqlite3 Connection.

Functions stay thin; the gift store owns connections, commits and error mapping.
"""
