# examples/belt_locating.py
"""Belt, blade and sample locating chain on the reference measurement set."""

from __future__ import annotations

import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from beltframe import Cylinder, build_belt_frame, compose, rotation, translation
from beltframe.utils.format import format_frame, format_matrix
from beltframe.utils.logger import get_logger

LOGGER = get_logger("examples.belt_locating")

# BELT LOCATING: B -> 0
BELT_ORIGIN = (1009.15, -16.49, 623.81)
BELT_X = [996.14, 1010.89, 1010.89, 1023.99, 1014.15, 1014.15, 1004.89, 1004.89, 1009.15]
BELT_Y = [-16.14, -29.24, 0.92, -16.14, -10.54, -22.95, -22.21, -10.51, -16.49]
BELT_Z = [625.57, 623.52, 623.48, 622.35, 623.61, 622.86, 624.73, 624.40, 623.81]

# SAMPLE LOCATING: S -> F, two axis points per section and repeated radii
SAMPLE_C11 = (0.002515, 120.0, 0.151981)
SAMPLE_C21 = (-0.061220, 180.0, 0.422887)
SAMPLE_RADII = [12.991316, 12.990244, 12.998138, 12.999339, 13.008986, 13.009134, 13.019839, 13.019753]

# belt axes flipped into the tooling convention
BELT_AXES = np.array(
    [
        [-1.0, 0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, -1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ]
)


def main() -> None:
    belt = build_belt_frame(BELT_ORIGIN, BELT_X, BELT_Y, BELT_Z)
    LOGGER.info("B -> 0: {}", format_frame(belt.frame))

    # BLADE LOCATING: B -> F, rotate first then translate
    blade = compose(translation((0.011, 0.047, 153.319)), rotation(-49.0, "z"))
    LOGGER.info("B -> F:\n{}", format_matrix(blade, precision=4))

    sample = Cylinder.from_radii(SAMPLE_C11, SAMPLE_C21, SAMPLE_RADII)
    LOGGER.info("S -> F (R={:.6f}): {}", sample.radius, format_frame(sample.frame))

    chain = compose(belt.transform, BELT_AXES, blade)
    LOGGER.info("F -> 0:\n{}", format_matrix(chain, precision=4))


if __name__ == "__main__":
    main()
