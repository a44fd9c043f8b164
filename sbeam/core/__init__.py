
from sbeam.core import calc_methods, defaults, postprocessing, preprocessing
from sbeam.core.exceptions import (
    InvalidGeometry, MalformedInput, MissingInput, SBeamError
)
from sbeam.core.preprocessing import *  # noqa: F401, F403
from sbeam.core.postprocessing import *  # noqa: F401, F403
from sbeam.core.calc_methods import *  # noqa: F401, F403

__all__ = [
    'calc_methods',
    'defaults',
    'InvalidGeometry',
    'MalformedInput',
    'MissingInput',
    'postprocessing',
    'preprocessing',
    'SBeamError',
]
