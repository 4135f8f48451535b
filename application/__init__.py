"""
Application Layer for the Program Progression API.

This package contains:
- ports/: Abstract repository interfaces (what the domain needs)
- use_cases/: Workflows coordinating the progression engine and the store
- exceptions: Application-level errors shared with infrastructure
"""
