"""
Grid operators for the stable fluids integrator.
"""
from .boundary import apply_boundary, set_boundary, VELOCITY_BOUNDARY, PRESSURE_BOUNDARY, DYE_BOUNDARY
from .advect import advect, advect_field
from .diffuse import diffuse, jacobi_diffusion_iteration, DIFFUSION_ITERATIONS
from .compute_divergence import compute_divergence
from .jacobi_pressure_iteration import jacobi_pressure_iteration, PRESSURE_ITERATIONS
from .pressure_projection import project, compute_pressure_gradient
from .splat import splat, splat_gaussian

__all__ = [
    'apply_boundary',
    'set_boundary',
    'VELOCITY_BOUNDARY',
    'PRESSURE_BOUNDARY',
    'DYE_BOUNDARY',
    'advect',
    'advect_field',
    'diffuse',
    'jacobi_diffusion_iteration',
    'DIFFUSION_ITERATIONS',
    'compute_divergence',
    'jacobi_pressure_iteration',
    'PRESSURE_ITERATIONS',
    'project',
    'compute_pressure_gradient',
    'splat',
    'splat_gaussian',
]
