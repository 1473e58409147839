"""Library Console - Utilities Package

Helpers shared by the console front end:
- Output rendering in plain, json or rich mode (ui_helpers.py)
- Console input validation (validators.py)
"""
