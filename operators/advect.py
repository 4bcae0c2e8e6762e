import warp as wp

from utils.field_kernels import bilerp, cell_center


@wp.kernel
def advect_field(
    velocity: wp.array3d(dtype=float),
    x_in: wp.array3d(dtype=float),
    x_out: wp.array3d(dtype=float),
    dt: float,
    dissipation: float,
    aspect_ratio: float,
):
    """
    Semi-Lagrangian advection of a field through the velocity field.

    PURPOSE:
    Each target cell traces its center backwards along the velocity for one
    time step and resamples the committed field there. The velocity is
    expressed in units of the domain height per second, so the x displacement
    is divided by the velocity grid aspect ratio (W / H). The resampled value
    is then scaled by the dissipation factor.

    INPUT VARIABLES:
    - velocity[y, x, 0:2]: float - Committed velocity (u, v), may be a different grid than x_in
    - x_in[y, x, c]: float - Committed state of the advected field
    - dt: float - Time step size
    - dissipation: float - Multiplier applied to the resampled value
    - aspect_ratio: float - Velocity grid width / height

    OUTPUT VARIABLES:
    - x_out[y, x, c]: float - dissipation * x_in(p - dt * v(p) / (aspect_ratio, 1))
    """
    y, x = wp.tid()
    pos = cell_center(x, y, x_in.shape[1], x_in.shape[0])

    u = bilerp(velocity, pos, 0)
    v = bilerp(velocity, pos, 1)
    prev = wp.vec2(pos[0] - dt * u / aspect_ratio, pos[1] - dt * v)

    for c in range(x_in.shape[2]):
        x_out[y, x, c] = dissipation * bilerp(x_in, prev, c)


def advect(velocity_read, target_pair, dt, dissipation):
    """Advect target_pair through velocity_read (a committed Field), then swap target_pair."""
    if velocity_read.channels < 2:
        raise ValueError(f"velocity needs at least 2 channels, got {velocity_read.channels}")
    aspect_ratio = velocity_read.width / velocity_read.height
    wp.launch(
        kernel=advect_field,
        dim=target_pair.launch_dim,
        inputs=[
            velocity_read.data,
            target_pair.read.data,
            target_pair.write.data,
            float(dt),
            float(dissipation),
            float(aspect_ratio),
        ],
        device=target_pair.device,
    )
    target_pair.swap()
