"""
Grid fields backing the fluid state.

A Field is a (H, W, C) float32 warp array with its origin at the bottom-left
cell. A DoubleBufferedField pairs two same-shaped Fields so that a kernel can
read the committed state while writing the next one.
"""
import numpy as np
import warp as wp

from utils.field_kernels import fill_field, resample_field

SUPPORTED_CHANNELS = (1, 2, 3, 4)


class Field:
    def __init__(self, width, height, channels, device=None):
        """
        Allocate a zero-initialized field.

        Args:
            width: Number of cells along x (>= 2)
            height: Number of cells along y (>= 2)
            channels: Floats per cell, one of 1, 2, 3, 4
            device: Warp device, defaults to the current warp device
        """
        width, height, channels = int(width), int(height), int(channels)
        if width < 2 or height < 2:
            raise ValueError(f"field must be at least 2x2, got {width}x{height}")
        if channels not in SUPPORTED_CHANNELS:
            raise ValueError(f"channels must be one of {SUPPORTED_CHANNELS}, got {channels}")

        if device is None:
            device = wp.get_device()

        self.width = width
        self.height = height
        self.channels = channels
        self.device = device
        self.data = wp.zeros(shape=(height, width, channels), dtype=float, device=device)

    @property
    def shape(self):
        """Grid size as (W, H)."""
        return (self.width, self.height)

    @property
    def launch_dim(self):
        return (self.height, self.width)

    def numpy(self):
        return self.data.numpy()

    def assign(self, values):
        values = np.asarray(values, dtype=np.float32)
        if values.shape != (self.height, self.width, self.channels):
            raise ValueError(
                f"values must have shape {(self.height, self.width, self.channels)}, got {values.shape}"
            )
        wp.copy(self.data, wp.from_numpy(values, dtype=float, device=self.device))

    def fill(self, value):
        wp.launch(
            kernel=fill_field,
            dim=self.launch_dim,
            inputs=[self.data, float(value)],
            device=self.device,
        )

    def resampled(self, width, height):
        """Return a new Field of the given size holding this field's contents, bilinearly resampled."""
        field = Field(width, height, self.channels, device=self.device)
        wp.launch(
            kernel=resample_field,
            dim=field.launch_dim,
            inputs=[self.data, field.data],
            device=self.device,
        )
        return field


class DoubleBufferedField:
    def __init__(self, width, height, channels, device=None):
        self._read = Field(width, height, channels, device=device)
        self._write = Field(width, height, channels, device=device)

    @property
    def read(self):
        return self._read

    @property
    def write(self):
        return self._write

    @property
    def width(self):
        return self._read.width

    @property
    def height(self):
        return self._read.height

    @property
    def channels(self):
        return self._read.channels

    @property
    def device(self):
        return self._read.device

    @property
    def shape(self):
        return self._read.shape

    @property
    def launch_dim(self):
        return self._read.launch_dim

    def swap(self):
        self._read, self._write = self._write, self._read

    def resized(self, width, height):
        """New pair at the given size; the committed state is resampled, the write buffer starts empty."""
        pair = DoubleBufferedField.__new__(DoubleBufferedField)
        pair._read = self._read.resampled(width, height)
        pair._write = Field(width, height, self.channels, device=self.device)
        return pair


def check_same_grid(*fields):
    """Raise ValueError unless every field (or pair) shares the same W x H."""
    shapes = [f.shape for f in fields]
    if any(shape != shapes[0] for shape in shapes[1:]):
        raise ValueError(f"fields must share the same grid, got {shapes}")
