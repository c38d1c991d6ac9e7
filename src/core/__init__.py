"""
Core numeric types, payload models, and contracts.

This package contains the exact rational / complex rational types, the
approximate complex type, and the serialization layers built on top of them.
"""
