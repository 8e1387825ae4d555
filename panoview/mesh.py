"""Triangle meshes and UV-sphere generation for panoramic projection."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

Vec3 = tuple[float, float, float]
Vec2 = tuple[float, float]


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex with position, normal and texture coordinate."""

    position: Vec3
    normal: Vec3
    uv: Vec2


@dataclass
class Mesh:
    """Indexed triangle mesh with a model transform."""

    vertexes: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    wireframe: bool = False
    model_matrix: np.ndarray = field(default_factory=lambda: np.identity(4))

    def move_to(self, position) -> None:
        """Replace the model transform with a translation to ``position``."""
        pos = np.asarray(position, dtype=float)
        if pos.shape != (3,):
            raise ValueError("position must have 3 components")
        matrix = np.identity(4)
        matrix[:3, 3] = pos
        self.model_matrix = matrix


def generate_sphere(radius: float, slices: int, stacks: int
                    ) -> tuple[list[Vec3], list[Vec3], list[Vec2], list[int]]:
    """Generate positions, normals, texture coordinates and triangle indices.

    Vertices run slice by slice from theta 0 to 2*pi, each slice from the
    +Z pole (phi 0) to the -Z pole. Pole rows emit a single triangle.
    """
    if slices < 1:
        raise ValueError("a sphere needs at least one slice")
    if stacks < 2:
        raise ValueError("a sphere needs at least two stacks")

    theta_step = 2.0 * math.pi / slices
    phi_step = math.pi / stacks

    positions: list[Vec3] = []
    normals: list[Vec3] = []
    uvs: list[Vec2] = []
    for i in range(slices + 1):
        theta = i * theta_step
        s = i / slices
        for j in range(stacks + 1):
            phi = j * phi_step
            nx = math.sin(phi) * math.cos(theta)
            ny = math.sin(phi) * math.sin(theta)
            nz = math.cos(phi)
            normals.append((nx, ny, nz))
            positions.append((radius * nx, radius * ny, radius * nz))
            uvs.append((s, j / stacks))

    indices: list[int] = []
    for i in range(slices):
        start = i * (stacks + 1)
        nxt = (i + 1) * (stacks + 1)
        for j in range(stacks):
            if j == 0:
                indices += [start, start + 1, nxt + 1]
            elif j == stacks - 1:
                indices += [start + j, start + j + 1, nxt + j]
            else:
                indices += [start + j, start + j + 1, nxt + j + 1,
                            nxt + j, start + j, nxt + j + 1]
    return positions, normals, uvs, indices


def sphere(radius: float, slices: int, stacks: int) -> Mesh:
    """Build a UV-sphere mesh."""
    positions, normals, uvs, indices = generate_sphere(radius, slices, stacks)
    vertexes = [Vertex(p, n, t) for p, n, t in zip(positions, normals, uvs)]
    return Mesh(vertexes=vertexes, indices=indices)