from typing import Annotated

import numpy as np
import numpy.typing as npt
from beartype import beartype, BeartypeConf
from beartype.vale import Is


# See https://beartype.readthedocs.io/en/latest/api_decor/#beartype.BeartypeConf.is_pep484_tower
beartowertype = beartype(conf=BeartypeConf(is_pep484_tower=True))

# Type aliases for numpy arrays with specific dimensions

# Time vector: (time_points,)
TIME__VECTOR = Annotated[
    npt.NDArray[np.floating],
    Is[lambda x: x.ndim == 1],
]

# Metabolic power trajectory: (time_points,) in W/kg
RATE__VECTOR = Annotated[
    npt.NDArray[np.floating],
    Is[lambda x: x.ndim == 1],
]

# Probe output for a single time instant: (output_count,)
PROBE_OUTPUT__VECTOR = Annotated[
    npt.NDArray[np.floating],
    Is[lambda x: x.ndim == 1 and x.shape[0] == 1],
]
