"""Domain layer — graph entities and pure traversal functions.

This layer has no I/O and no logging. It must never import from
infrastructure, services, commands, or output.
"""
