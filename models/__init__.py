"""
models/ - Domain Models
========================
Plain dataclasses shared by every layer.
"""
