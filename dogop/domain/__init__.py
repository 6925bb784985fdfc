"""Domain-level types and business rules.

This package contains logic that defines *what* the business outcomes are,
independent from *where* they are produced (repositories, routers, etc.).
"""
