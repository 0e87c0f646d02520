"""
Core domain models, money primitives, contracts and errors.

This package is independent of any storage or presentation layer.
"""
