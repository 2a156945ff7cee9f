"""
Application Layer for the training tracker.

This package contains:
- ports/: Abstract repository interfaces (what the analytics need)
- exceptions.py: Errors shared by ports, services and their implementations
"""
