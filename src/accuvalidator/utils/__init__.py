"""
Contains some useful utility functions to be used in check predicates.
"""
from .type_checks import conforms_to
