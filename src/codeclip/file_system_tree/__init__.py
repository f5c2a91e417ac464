"""File system tree representation with configurable exclusion rules.

This module provides classes for building the tree of directories and source
files a code tree is rendered from, with support for excluding entries based
on specified rules.
"""
