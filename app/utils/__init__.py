"""
Utilities Package

Helper functions used across the application:
- identifiers.py: store identifier generation and shape checks
"""
