import warp as wp

from utils.field_kernels import is_border

DIFFUSION_ITERATIONS = 20


@wp.kernel
def jacobi_diffusion_iteration(x_in: wp.array3d(dtype=float), x_out: wp.array3d(dtype=float), nu_dt: float):
    """
    One Jacobi iteration of implicit viscous diffusion.

    PURPOSE:
    Relaxes (I - nu * dt * laplacian) x_new = x_old. Every interior cell becomes
    (nu_dt * (left + right + top + bottom) + center) / (1 + 4 * nu_dt), with all
    values taken from the previous iteration. Border cells belong to the
    boundary operator and are copied through.

    INPUT VARIABLES:
    - x_in[y, x, c]: float - Previous iteration
    - nu_dt: float - Viscosity times time step

    OUTPUT VARIABLES:
    - x_out[y, x, c]: float - Next iteration
    """
    y, x = wp.tid()
    height = x_in.shape[0]
    width = x_in.shape[1]

    if is_border(x, y, width, height):
        for c in range(x_in.shape[2]):
            x_out[y, x, c] = x_in[y, x, c]
        return

    denom = 1.0 + 4.0 * nu_dt
    for c in range(x_in.shape[2]):
        neighbors = x_in[y, x - 1, c] + x_in[y, x + 1, c] + x_in[y - 1, x, c] + x_in[y + 1, x, c]
        x_out[y, x, c] = (nu_dt * neighbors + x_in[y, x, c]) / denom


def diffuse(velocity_pair, viscosity, dt, iterations=DIFFUSION_ITERATIONS):
    nu_dt = float(viscosity) * float(dt)
    for _ in range(iterations):
        wp.launch(
            kernel=jacobi_diffusion_iteration,
            dim=velocity_pair.launch_dim,
            inputs=[velocity_pair.read.data, velocity_pair.write.data, nu_dt],
            device=velocity_pair.device,
        )
        velocity_pair.swap()
