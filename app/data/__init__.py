"""
Data access layer.

Design rules:
- Views call ONLY functions in this package.
- The backend client is built once by app.py and passed in; nothing here holds a module-level client.
- No env var reads here (config-only).
"""
