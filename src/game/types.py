from __future__ import annotations

import numpy as np
import numpy.typing as npt

Grid = npt.NDArray[np.int8]
Line = tuple[int, int, int]
Player = int
Position = int
