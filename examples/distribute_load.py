"""Spread a weight over contact normals taken from the lattice's lower hemisphere."""

import logging

import numpy as np
import matplotlib.pyplot as plt

from icolattice.lattice import IcoLattice, distribute_forces
from icolattice.logging_config import setup_logging


setup_logging(level=logging.DEBUG)

lattice = IcoLattice(3)
vertices = np.array(list(lattice.vertices))
contacts = vertices[vertices[:, 1] < -0.2]

weight = np.array([0.0, -9.81, 0.0])
loads = distribute_forces(contacts, weight, k=50.0)
print(f"{len(contacts)} contacts, residual {np.linalg.norm(loads @ contacts + weight):.3e}")

plt.bar(np.arange(len(loads)), loads)
plt.xlabel("contact")
plt.ylabel("load")
plt.title("Contact loads balancing a weight")
plt.grid(alpha=0.3)
plt.tight_layout()
plt.show()
