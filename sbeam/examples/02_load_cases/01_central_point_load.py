"""
Example 01:
Stress check of a simply supported beam with a midspan point load

A point load of 100 kN acts at midspan of the 6.3 m long H-400x200 beam.
The example shows:

- evaluating the load case with and without a buckling length
- reading the check ratio and the deflection
- plotting the sampled bending moment
"""

import matplotlib.pyplot as plt

from sbeam.core.calc_methods import evaluate
from sbeam.core.postprocessing import plot_moment_diagram
from sbeam.core.preprocessing import CentralPointLoad, HShape

# 1. Section parameters
p = HShape(200, 400, 8, 13, 235, 6300).parameters

# 2. Compression flange braced at the supports only (Lb = 0 disables the
#    lateral buckling reduction)
result = evaluate('central', p, CentralPointLoad(load=100))
print(result.summary())

# 3. Unbraced length of 8 m
reduced = evaluate('central', p,
                   CentralPointLoad(load=100, buckling_length=8000))
print(f"fb with Lb = 8000 mm: {reduced.allowable_stress:.3f} N/mm^2, "
      f"Sig/fb = {reduced.ratio:.3f} -> {'OK' if reduced.passed else 'NG'}")

# 4. Moment diagram
plot_moment_diagram(result.diagram)
plt.show()
