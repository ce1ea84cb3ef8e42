#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdtree/utils/__init__.py
"""Utility modules for the mdtree package.

This package contains display-width helpers for text layout and the
dependency-checking decorator for optional components.
"""
