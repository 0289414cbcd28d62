"""Whitted-style recursive ray tracer.

This package renders scenes of implicit-surface shapes by casting rays and
resolving shadows, mirror reflection and dielectric refraction recursively.

Subpackages:
    core: Affine tuples, colors, 4x4 matrices, transforms and rays
    geometry: Shape contract and the concrete shape kinds
    materials: Phong materials and procedural patterns
    scene: Lights, intersection bookkeeping, world and scene descriptions
    camera: Camera model and the per-pixel render loop
    preview: Taichi-backed canvas and PPM/PNG export
"""

__version__ = "0.1.0"
