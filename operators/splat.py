import warp as wp

from utils.field_kernels import cell_center


@wp.kernel
def splat_gaussian(
    x_in: wp.array3d(dtype=float),
    x_out: wp.array3d(dtype=float),
    point: wp.vec2,
    value: wp.vec4,
    radius: float,
    aspect_ratio: float,
):
    """
    Add a Gaussian impulse centered at a normalized point.

    PURPOSE:
    Every cell gets exp(-|d|^2 / radius) * value added, where d is the offset
    from the point to the cell center with its x component scaled by the
    aspect ratio, so the footprint is round in physical space.

    INPUT VARIABLES:
    - x_in[y, x, c]: float - Committed field state
    - point: vec2 - Splat center in normalized coordinates
    - value: vec4 - Impulse per channel, only the field's channels are used
    - radius: float - Gaussian width parameter
    - aspect_ratio: float - Domain width / height

    OUTPUT VARIABLES:
    - x_out[y, x, c]: float - x_in + weight * value
    """
    y, x = wp.tid()
    pos = cell_center(x, y, x_in.shape[1], x_in.shape[0])
    d = wp.vec2((pos[0] - point[0]) * aspect_ratio, pos[1] - point[1])
    weight = wp.exp(-wp.dot(d, d) / radius)

    for c in range(x_in.shape[2]):
        x_out[y, x, c] = x_in[y, x, c] + weight * value[c]


def splat(field_pair, point, value, radius, aspect_ratio):
    value = [float(v) for v in value]
    if len(value) < field_pair.channels:
        raise ValueError(f"value needs {field_pair.channels} components, got {len(value)}")
    value = (value + [0.0, 0.0, 0.0, 0.0])[:4]

    wp.launch(
        kernel=splat_gaussian,
        dim=field_pair.launch_dim,
        inputs=[
            field_pair.read.data,
            field_pair.write.data,
            wp.vec2(float(point[0]), float(point[1])),
            wp.vec4(value[0], value[1], value[2], value[3]),
            float(radius),
            float(aspect_ratio),
        ],
        device=field_pair.device,
    )
    field_pair.swap()
