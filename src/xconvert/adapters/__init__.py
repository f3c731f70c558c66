# src/xconvert/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains adapters for external systems:
- Providers (currency and rate APIs)
"""

__all__ = []
