"""
Shared error handling package.

Centralizes outcome classification and fault handling so that
every resource router maps results to HTTP responses the same way.
"""
