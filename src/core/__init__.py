"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the filter function
converter that are independent of the document tree and rendering backend.
"""
