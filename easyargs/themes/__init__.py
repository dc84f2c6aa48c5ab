"""
EasyArgs CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .colors import OneColors, get_one_theme

__all__ = [
    "OneColors",
    "get_one_theme",
]
