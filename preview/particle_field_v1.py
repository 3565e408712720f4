from __future__ import annotations

"""
Particle field v1 (headless stand-in for the GPU simulation)

Particles sit on a Fibonacci sphere and orbit the y axis. step(now_ms) rewrites
the flat xyz buffer in place, the way the host simulation owns and mutates its
buffer every frame. The word engine only reads `positions`.
"""

from array import array
import math

from runtime.rng_v1 import DeterministicRNG

GOLDEN_ANGLE = math.pi * (3.0 - math.sqrt(5.0))


class ParticleFieldV1:
    def __init__(self, count: int = 2000, radius: float = 6.0, angular_speed: float = 0.15, seed: int = 0):
        self.count = max(0, int(count))
        self.radius = float(radius)
        self.angular_speed = float(angular_speed)  # radians per second
        rng = DeterministicRNG(seed)
        self._base = array("f")
        for i in range(self.count):
            y = 1.0 - (i / float(max(1, self.count - 1))) * 2.0
            r = math.sqrt(max(0.0, 1.0 - y * y))
            theta = GOLDEN_ANGLE * i
            # slight radial jitter so shells are not perfectly regular
            shell = self.radius * (1.0 + rng.uniform(-0.05, 0.05))
            self._base.extend((math.cos(theta) * r * shell, y * shell, math.sin(theta) * r * shell))
        self.positions = array("f", self._base)

    def step(self, now_ms: float) -> array:
        a = self.angular_speed * float(now_ms) / 1000.0
        c, s = math.cos(a), math.sin(a)
        base = self._base
        out = self.positions
        for i in range(self.count):
            k = i * 3
            x, y, z = base[k], base[k + 1], base[k + 2]
            out[k] = x * c + z * s
            out[k + 1] = y
            out[k + 2] = -x * s + z * c
        return out
