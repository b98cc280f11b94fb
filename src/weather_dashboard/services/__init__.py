"""
Shared utilities for talking to the outside world.

- http.py - ``requests`` session with retry, timeout and identifying User-Agent
"""
