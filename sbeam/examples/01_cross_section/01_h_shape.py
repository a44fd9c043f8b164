"""
Example 01:
Section parameters of a rolled H shape

This example builds the H-400x200x8x13 member used as the default section
and prints the nine values passed on to the load case evaluator:

- depth, length and yield stress as entered
- second moment of area and section modulus
- torsional radius of gyration, slenderness and flange area, which are only
  needed for the allowable bending stress
"""

import matplotlib.pyplot as plt

from sbeam.core.preprocessing import HShape
from sbeam.core.postprocessing import plot_cross_section

# 1. Define the section (mm, N/mm²)
section = HShape(width=200, height=400, web_thickness=8,
                 flange_thickness=13, yield_stress=235, length=6300)

# 2. Derive the section parameters
p = section.parameters

print("=== H shape section parameters ===")
print(f"Second moment of area Iy   : {p.mom_of_int:.1f} mm^4")
print(f"Section modulus Zy         : {p.section_modulus:.1f} mm^3")
print(f"Torsional radius i_t       : {p.torsional_radius:.3f} mm")
print(f"Slenderness lambda         : {p.slenderness:.3f}")
print(f"Flange area Af             : {p.flange_area:.1f} mm^2")

# 3. The same values as a table
print(p.table())

# 4. Draw the plates
plot_cross_section(section)
plt.show()
