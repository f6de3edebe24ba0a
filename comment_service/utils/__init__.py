# comment_service/utils/__init__.py
"""
Utility functions package.

- general.py: response helpers shared by the API blueprints
"""

from .general import _handle_service_result, read_submission_payload

__all__ = [
    '_handle_service_result',
    'read_submission_payload',
]
