import warp as wp

from utils.field_kernels import is_border


@wp.kernel
def compute_divergence(velocity: wp.array3d(dtype=float), divergence: wp.array3d(dtype=float)):
    """
    Central-difference divergence of a collocated velocity field.

    PURPOSE:
    div = ((u_right - u_left) + (v_top - v_bottom)) / 2 in grid units, for every
    interior cell. Border cells have no full stencil and are set to zero.

    INPUT VARIABLES:
    - velocity[y, x, 0:2]: float - Committed velocity (u, v)

    OUTPUT VARIABLES:
    - divergence[y, x, 0]: float - Divergence at the cell
    """
    y, x = wp.tid()
    if is_border(x, y, velocity.shape[1], velocity.shape[0]):
        divergence[y, x, 0] = 0.0
        return

    du = velocity[y, x + 1, 0] - velocity[y, x - 1, 0]
    dv = velocity[y + 1, x, 1] - velocity[y - 1, x, 1]
    divergence[y, x, 0] = (du + dv) / 2.0
