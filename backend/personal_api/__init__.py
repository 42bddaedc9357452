"""personal-api: resume download and contact form relay for a personal website.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
