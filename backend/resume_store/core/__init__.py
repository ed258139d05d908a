"""Core: repository contracts, filters, domain types and the error hierarchy.

Nothing in core imports from infrastructure.
"""
