from __future__ import annotations

"""
Particle recruitment v1 (greedy nearest-unused-neighbor)

Binds particle indices to word target points.

Contract (keep when optimizing, e.g. with a spatial grid):
- targets are processed strictly in the order given
- each target claims the closest unclaimed particle (squared distance)
- ties go to the lowest particle index
- when particles run out, the remaining targets are left unmatched; the result
  is shorter than the target list and nothing is raised

This is first-claim-wins, not an optimal matching: an early target may take a
particle that would have suited a later target better. The word's visual build
depends on that, so do not swap in a global assignment solver.

positions is a flat interleaved xyz buffer (list, array('f'), memoryview...).
It is only read.
"""

from dataclasses import dataclass
from typing import List, Sequence, Set

from .word_layout_v1 import WordPoint


@dataclass(frozen=True)
class RecruitedParticle:
    particle_index: int
    target: WordPoint

    @property
    def letter_index(self) -> int:
        return self.target.letter_index


def usable_particle_count(positions: Sequence[float], particle_count: int) -> int:
    n = int(particle_count)
    if n <= 0:
        return 0
    return min(n, len(positions) // 3)


def recruit_pairs(targets: Sequence[WordPoint], positions: Sequence[float], particle_count: int) -> List[RecruitedParticle]:
    """Greedy assignment; returns one (particle, target) pair per matched target, in target order."""
    n = usable_particle_count(positions, particle_count)
    used: Set[int] = set()
    out: List[RecruitedParticle] = []
    if n <= 0:
        return out

    for target in targets:
        if len(used) >= n:
            break
        tx, ty, tz = float(target.x), float(target.y), float(target.z)
        best_i = -1
        best_d2 = float("inf")
        for i in range(n):
            if i in used:
                continue
            k = i * 3
            dx = positions[k] - tx
            dy = positions[k + 1] - ty
            dz = positions[k + 2] - tz
            d2 = dx*dx + dy*dy + dz*dz
            if d2 < best_d2:
                best_d2 = d2
                best_i = i
        if best_i >= 0:
            used.add(best_i)
            out.append(RecruitedParticle(best_i, target))
    return out


def recruit_particles(targets: Sequence[WordPoint], positions: Sequence[float], particle_count: int) -> List[int]:
    """Particle indices only, aligned with the matched prefix of `targets`."""
    return [r.particle_index for r in recruit_pairs(targets, positions, particle_count)]
