"""Infrastructure layer — graph document loading and the NetworkX engine.

This layer depends on stdlib and third-party libs (pydantic, NetworkX)
plus the domain entities it materializes. It must never import from
services, commands, or output.
"""
