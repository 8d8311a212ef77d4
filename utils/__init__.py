"""
Shared helpers: output naming and error types
"""
