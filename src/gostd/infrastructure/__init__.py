"""Infrastructure layer: archive sources and module-zip packing.

This layer depends on stdlib and the git binary.
It must never import from domain, services, commands, or output.
The service layer bridges between domain rules and infrastructure.
"""
