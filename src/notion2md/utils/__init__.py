#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers for notion2md: networking, image persistence and output writing."""
