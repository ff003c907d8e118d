"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks shared by the
closure, pipeline and process demos.
"""
