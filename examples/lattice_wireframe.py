"""Plot the icosahedral lattice wireframe and a projected direction."""

import numpy as np
import matplotlib.pyplot as plt

from icolattice.lattice import IcoLattice, Lattice, validate_mesh_regularity


n = 4
geometry = IcoLattice(n)
lattice = Lattice.from_geometry(geometry)
validate_mesh_regularity(lattice)

points = lattice.vertex_array()
direction = np.array([0.3, 0.8, -0.5])
a, b, c, rem = geometry.project(direction)
print(f"direction {direction} hits triangle ({a}, {b}, {c}) at {rem}")

fig = plt.figure(figsize=(6, 6))
ax = fig.add_subplot(projection="3d")
for i, j in lattice.edges:
    seg = points[[i, j]]
    ax.plot(seg[:, 0], seg[:, 2], seg[:, 1], color="0.6", lw=0.6)

tri = points[[a, b, c, a]]
ax.plot(tri[:, 0], tri[:, 2], tri[:, 1], color="tab:red", lw=2.0)
unit = direction / np.linalg.norm(direction)
ax.quiver(0, 0, 0, unit[0], unit[2], unit[1], color="tab:red")

ax.set_box_aspect((1, 1, 1))
ax.set_title(f"Icosahedral lattice, n={n} ({lattice.n_vertices} vertices)")
plt.tight_layout()
plt.show()
