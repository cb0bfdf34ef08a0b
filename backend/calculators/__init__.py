"""
Deterministic crater energy engine.

Pure Python math. Given a contact size, crater geometry, depth, impact type
and material, produce the energy (J) needed to displace the crater volume:
strength limit × volume.
"""
