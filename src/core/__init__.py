"""
Core numeric types, serializable records, and contracts.

This module contains the arbitrary-precision arithmetic engine and the
layers that exchange its values as JSON. It has no dependency on any
consumer of the number types.
"""
