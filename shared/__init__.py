"""
Shared

Code shared across the OCL packages: surcharge base class, API client and
configuration.
"""
