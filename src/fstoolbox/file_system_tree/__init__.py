"""Directory tree walking with configurable exclusion rules.

This package builds anytree-based trees of filesystem entries and flattens them
into the directory and file lists returned by a walk.
"""
