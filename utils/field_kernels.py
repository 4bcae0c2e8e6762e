import warp as wp


@wp.func
def fetch(field: wp.array3d(dtype=float), x: int, y: int, c: int):
    """Read channel c of cell (x, y), clamping out-of-range indices to the nearest edge cell."""
    cx = wp.clamp(x, 0, field.shape[1] - 1)
    cy = wp.clamp(y, 0, field.shape[0] - 1)
    return field[cy, cx, c]


@wp.func
def bilerp(field: wp.array3d(dtype=float), pos: wp.vec2, c: int):
    """
    Bilinear sample of channel c at a normalized position.

    Cell centers sit at ((x + 0.5) / W, (y + 0.5) / H), so the grid coordinate
    of a normalized position is pos * size - 0.5 and a cell center samples its
    own value exactly.
    """
    gx = pos[0] * float(field.shape[1]) - 0.5
    gy = pos[1] * float(field.shape[0]) - 0.5

    ix = int(wp.floor(gx))
    iy = int(wp.floor(gy))
    fx = gx - float(ix)
    fy = gy - float(iy)

    x00 = fetch(field, ix, iy, c)
    x10 = fetch(field, ix + 1, iy, c)
    x01 = fetch(field, ix, iy + 1, c)
    x11 = fetch(field, ix + 1, iy + 1, c)

    return wp.lerp(wp.lerp(x00, x10, fx), wp.lerp(x01, x11, fx), fy)


@wp.func
def cell_center(x: int, y: int, width: int, height: int):
    return wp.vec2((float(x) + 0.5) / float(width), (float(y) + 0.5) / float(height))


@wp.func
def is_border(x: int, y: int, width: int, height: int):
    return x == 0 or y == 0 or x == width - 1 or y == height - 1


@wp.kernel
def fill_field(x_out: wp.array3d(dtype=float), value: float):
    y, x = wp.tid()
    for c in range(x_out.shape[2]):
        x_out[y, x, c] = value


@wp.kernel
def scale_field(x_in: wp.array3d(dtype=float), x_out: wp.array3d(dtype=float), factor: float):
    """x_out = factor * x_in, used to warm-start the pressure solve."""
    y, x = wp.tid()
    for c in range(x_in.shape[2]):
        x_out[y, x, c] = factor * x_in[y, x, c]


@wp.kernel
def add_scaled(
    u: wp.array3d(dtype=float),
    v: wp.array3d(dtype=float),
    x_out: wp.array3d(dtype=float),
    alpha: float,
):
    """x_out = u + alpha * v, cell by cell over the channels of u."""
    y, x = wp.tid()
    for c in range(u.shape[2]):
        x_out[y, x, c] = u[y, x, c] + alpha * v[y, x, c]


@wp.kernel
def resample_field(x_in: wp.array3d(dtype=float), x_out: wp.array3d(dtype=float)):
    """Bilinearly resample x_in onto the (possibly different) grid of x_out."""
    y, x = wp.tid()
    pos = cell_center(x, y, x_out.shape[1], x_out.shape[0])
    for c in range(x_out.shape[2]):
        x_out[y, x, c] = bilerp(x_in, pos, c)
