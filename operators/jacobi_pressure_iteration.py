import warp as wp

from utils.field_kernels import is_border

PRESSURE_ITERATIONS = 40


@wp.kernel
def jacobi_pressure_iteration(
    p_in: wp.array3d(dtype=float),
    divergence: wp.array3d(dtype=float),
    p_out: wp.array3d(dtype=float),
):
    """
    One Jacobi iteration for the pressure Poisson equation.

    PURPOSE:
    Solves laplacian(p) = div on the unit-spaced grid. Each interior cell
    becomes (p_left + p_right + p_top + p_bottom - div) / 4 from the previous
    iteration. Border cells are owned by the boundary operator (alpha = +1)
    and are copied through.

    INPUT VARIABLES:
    - p_in[y, x, 0]: float - Pressure from the previous iteration
    - divergence[y, x, 0]: float - Right-hand side

    OUTPUT VARIABLES:
    - p_out[y, x, 0]: float - Updated pressure
    """
    y, x = wp.tid()
    if is_border(x, y, p_in.shape[1], p_in.shape[0]):
        p_out[y, x, 0] = p_in[y, x, 0]
        return

    p_neighbors = p_in[y, x - 1, 0] + p_in[y, x + 1, 0] + p_in[y - 1, x, 0] + p_in[y + 1, x, 0]
    p_out[y, x, 0] = (p_neighbors - divergence[y, x, 0]) / 4.0
