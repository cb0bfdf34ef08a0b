"""
Normal (partial penetration) impact.

The crater narrows from a wide mouth (r_crater) down to a contact-sized base
(r_contact). Volume = cylinder of the contact radius + frustum between the
two radii, both of height = depth.
"""

import math

from .base import BaseCalculator, CraterDimensions


class NormalImpactCalculator(BaseCalculator):

    def volume(self, dims: CraterDimensions) -> float:
        r1 = dims.r_contact_m
        r2 = dims.r_crater_m
        h = dims.depth_m

        v_cylinder = math.pi * r1 * r1 * h
        v_frustum = (math.pi * h / 3) * (r2 * r2 + r2 * r1 + r1 * r1)
        return v_cylinder + v_frustum
