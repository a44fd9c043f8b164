"""
Example 02:
All load cases on one box section

Loads can be given as load objects or as plain dictionaries of their field
names. The section parameters can also be passed as the flat nine-value
vector.
"""

from sbeam.core import defaults
from sbeam.core.calc_methods import evaluate
from sbeam.core.preprocessing import build_section

vector = build_section('box', defaults.BOX_SHAPE_DEFAULTS).vector

cases = (
    ('central', {'load': defaults.POINT_LOAD}),
    ('trapezoid', {'load': defaults.TRAPEZOID_LOAD,
                   'width': 1200}),
    ('cantilever', {'load': 10}),
    ('moment', {'moment': 25, 'buckling_length': 3200}),
)

for kind, load in cases:
    result = evaluate(kind, vector, load)
    print(f"{kind:<10} M = {result.moment:8.3f} kNm, "
          f"Sig/fb = {result.ratio:6.3f}, D = {result.deflection:7.3f} mm")
    print("           diagram:", result.diagram.values)

# An unrecognized section kind is reported as a failing check.
broken = list(vector)
broken[5] = 99
result = evaluate('central', broken, {'load': 10})
print(f"kind 99 -> fb = {result.allowable_stress}, Sig/fb = {result.ratio}")
