"""
Pointer bookkeeping: turns press / move / release events into the per-tick
pointer samples the simulator splats into the velocity and dye fields.
"""
import numpy as np


class Pointer:
    """An active pointer: normalized position (y up), last displacement and a fixed color."""
    def __init__(self, id, x, y, color, dx=0.0, dy=0.0):
        self.id = id
        self.x = x
        self.y = y
        self.dx = dx
        self.dy = dy
        self.color = color


class PointerTracker:
    def __init__(self, seed=None):
        self.pointers = []
        self.rng = np.random.default_rng(seed)

    def _index(self, id):
        for i, pointer in enumerate(self.pointers):
            if pointer.id == id:
                return i
        return -1

    def press(self, id, x, y):
        """Start tracking a pointer with a random RGB color."""
        color = tuple(float(c) for c in self.rng.uniform(0.0, 1.0, size=3))
        pointer = Pointer(id, x, y, color)
        self.pointers.append(pointer)
        return pointer

    def move(self, id, x, y):
        """
        Update a pointer's position. The displacement is measured from the
        previous position and is kept until the next move. Unknown ids are ignored.
        """
        idx = self._index(id)
        if idx < 0:
            return None
        pointer = self.pointers[idx]
        pointer.dx = x - pointer.x
        pointer.dy = y - pointer.y
        pointer.x = x
        pointer.y = y
        return pointer

    def release(self, id):
        idx = self._index(id)
        if idx >= 0:
            self.pointers.pop(idx)

    # pointer cancel and pointer leave end the pointer the same way a release does
    cancel = release
    leave = release

    def is_active(self, id):
        return self._index(id) >= 0

    def active(self):
        return list(self.pointers)
