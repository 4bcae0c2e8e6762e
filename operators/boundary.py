import warp as wp

VELOCITY_BOUNDARY = -1.0
PRESSURE_BOUNDARY = 1.0
DYE_BOUNDARY = 0.0


@wp.kernel
def set_boundary(x_in: wp.array3d(dtype=float), x_out: wp.array3d(dtype=float), alpha: float):
    """
    Rewrite the outermost ring of a field from its inward neighbor.

    PURPOSE:
    Border cells take alpha times the value of the cell one step inward along
    the inward normal of every edge they touch, so corners read their diagonal
    neighbor. Interior cells are copied through unchanged.
    - alpha = -1: solid wall for velocity (both components negate)
    - alpha = +1: zero normal gradient for pressure
    - alpha =  0: absorbing wall for dye

    INPUT VARIABLES:
    - x_in[y, x, c]: float - Committed field state
    - alpha: float - Border coefficient

    OUTPUT VARIABLES:
    - x_out[y, x, c]: float - Field with the border rewritten
    """
    y, x = wp.tid()
    height = x_in.shape[0]
    width = x_in.shape[1]

    border_l = 1 - wp.min(x, 1)
    border_r = 1 - wp.min(width - 1 - x, 1)
    border_b = 1 - wp.min(y, 1)
    border_t = 1 - wp.min(height - 1 - y, 1)

    coef = 1.0
    if border_l + border_r + border_b + border_t > 0:
        coef = alpha

    sx = x + border_l - border_r
    sy = y + border_b - border_t

    for c in range(x_in.shape[2]):
        x_out[y, x, c] = coef * x_in[sy, sx, c]


def apply_boundary(field_pair, alpha):
    wp.launch(
        kernel=set_boundary,
        dim=field_pair.launch_dim,
        inputs=[field_pair.read.data, field_pair.write.data, float(alpha)],
        device=field_pair.device,
    )
    field_pair.swap()
