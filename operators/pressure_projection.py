import warp as wp

from utils.field_kernels import add_scaled, is_border, scale_field
from utils.fields import check_same_grid
from operators.boundary import PRESSURE_BOUNDARY, VELOCITY_BOUNDARY, apply_boundary
from operators.compute_divergence import compute_divergence
from operators.jacobi_pressure_iteration import PRESSURE_ITERATIONS, jacobi_pressure_iteration


@wp.kernel
def compute_pressure_gradient(pressure: wp.array3d(dtype=float), gradient: wp.array3d(dtype=float)):
    """
    Central-difference pressure gradient ((p_r - p_l) / 2, (p_t - p_b) / 2).
    Zero on the border ring, which leaves border velocity untouched by the projection.
    """
    y, x = wp.tid()
    if is_border(x, y, pressure.shape[1], pressure.shape[0]):
        gradient[y, x, 0] = 0.0
        gradient[y, x, 1] = 0.0
        return

    gradient[y, x, 0] = (pressure[y, x + 1, 0] - pressure[y, x - 1, 0]) / 2.0
    gradient[y, x, 1] = (pressure[y + 1, x, 0] - pressure[y - 1, x, 0]) / 2.0


def project(
    velocity_pair,
    pressure_pair,
    scratch_div,
    scratch_grad,
    pressure_retention,
    iterations=PRESSURE_ITERATIONS,
):
    """
    Make the velocity field (close to) divergence free.

    The pressure solve is warm-started from pressure_retention times the
    previous pressure and runs a fixed number of Jacobi iterations; there is
    no convergence test.
    """
    check_same_grid(velocity_pair, pressure_pair, scratch_div, scratch_grad)
    device = velocity_pair.device
    dim = velocity_pair.launch_dim

    apply_boundary(velocity_pair, VELOCITY_BOUNDARY)

    wp.launch(
        kernel=compute_divergence,
        dim=dim,
        inputs=[velocity_pair.read.data, scratch_div.data],
        device=device,
    )

    wp.launch(
        kernel=scale_field,
        dim=dim,
        inputs=[pressure_pair.read.data, pressure_pair.write.data, float(pressure_retention)],
        device=device,
    )
    pressure_pair.swap()

    for _ in range(iterations):
        apply_boundary(pressure_pair, PRESSURE_BOUNDARY)
        wp.launch(
            kernel=jacobi_pressure_iteration,
            dim=dim,
            inputs=[pressure_pair.read.data, scratch_div.data, pressure_pair.write.data],
            device=device,
        )
        pressure_pair.swap()

    apply_boundary(velocity_pair, VELOCITY_BOUNDARY)
    apply_boundary(pressure_pair, PRESSURE_BOUNDARY)

    wp.launch(
        kernel=compute_pressure_gradient,
        dim=dim,
        inputs=[pressure_pair.read.data, scratch_grad.data],
        device=device,
    )
    wp.launch(
        kernel=add_scaled,
        dim=dim,
        inputs=[velocity_pair.read.data, scratch_grad.data, velocity_pair.write.data, -1.0],
        device=device,
    )
    velocity_pair.swap()
