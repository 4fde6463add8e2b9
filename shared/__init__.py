"""
Shared Kernel

Building blocks every bounded context of the marketplace relies on: the
entity and value object bases, the domain error taxonomy, the unit of
work and the Django adapters (encrypted fields, exception handler).
"""
