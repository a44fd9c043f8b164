
from sbeam.core.postprocessing.results import AnalysisResult, MomentDiagram
from sbeam.core.postprocessing.plot import (
    plot_cross_section, plot_moment_diagram
)


__all__ = [
    'AnalysisResult',
    'MomentDiagram',
    'plot_cross_section',
    'plot_moment_diagram',
]
