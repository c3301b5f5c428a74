"""
OCL Services Shipping Toolkit

Rate calculation, tracking step mapping, invoice arithmetic and REST API
wrappers for the OCL Services courier platform.
"""

from .version import VERSION

__version__ = VERSION
