"""
Data module: group definition loading and validation.
"""
from src.data.loader import (
    TeamDescriptor, GroupDefinitions, DEFAULT_GROUPS_PATH, parse_groups, load_groups
)

__all__ = [
    'TeamDescriptor',
    'GroupDefinitions',
    'DEFAULT_GROUPS_PATH',
    'parse_groups',
    'load_groups',
]
