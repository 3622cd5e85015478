"""
Application layer for the workout API.

This package contains:
- exceptions: Terminal failure kinds of workout generation and the HTTP
  responses they map to
"""
