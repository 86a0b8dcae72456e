"""
Project settings (constants + small helpers).
Units: metres (m), seconds (s), m^3/s^2 for gravitational parameters.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

# Paths
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
OUTPUT_DIR = os.path.join(BASE_DIR, "outputs")

# Run
VALIDATE_ON_IMPORT = False

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s  %(levelname)-7s  %(name)s  %(message)s"
LOG_DATEFMT = "%H:%M:%S"

# Time line: instants are seconds from J2000 on the TT scale
J2000_EPOCH = "2000-01-01T12:00:00"
TIME_SCALE = "tt"

# Chebyshev evaluation: |scaled t| may overshoot 1 by roundoff, not by more
CHEBYSHEV_EVALUATION_SLACK = 1.1

# Newhall approximation
NEWHALL_DIVISIONS = 8
NEWHALL_MIN_DEGREE = 3
NEWHALL_MAX_DEGREE = 17
NEWHALL_VELOCITY_WEIGHT = 0.4

# Symplectic integration
DEFAULT_SYMPLECTIC_SCHEME = "yoshida4"
DEFAULT_SAMPLING_PERIOD = 1
# sum of scheme coefficients must be 1 to this tolerance
SCHEME_COEFFICIENT_TOLERANCE = 1e-12


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper()),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def validate_settings() -> None:
    if CHEBYSHEV_EVALUATION_SLACK < 1.0:
        raise ValueError("CHEBYSHEV_EVALUATION_SLACK must be >= 1")
    if NEWHALL_DIVISIONS <= 0:
        raise ValueError("NEWHALL_DIVISIONS must be > 0")
    if NEWHALL_MIN_DEGREE < 3:
        raise ValueError("NEWHALL_MIN_DEGREE must be >= 3 (both ends are matched exactly)")
    if NEWHALL_MAX_DEGREE < NEWHALL_MIN_DEGREE:
        raise ValueError("NEWHALL_MAX_DEGREE must be >= NEWHALL_MIN_DEGREE")
    if NEWHALL_MAX_DEGREE + 1 > 2 * (NEWHALL_DIVISIONS + 1):
        raise ValueError("NEWHALL_MAX_DEGREE exceeds the number of samples")
    if NEWHALL_VELOCITY_WEIGHT <= 0:
        raise ValueError("NEWHALL_VELOCITY_WEIGHT must be > 0")
    if DEFAULT_SAMPLING_PERIOD < 0:
        raise ValueError("DEFAULT_SAMPLING_PERIOD must be >= 0")
    if SCHEME_COEFFICIENT_TOLERANCE <= 0:
        raise ValueError("SCHEME_COEFFICIENT_TOLERANCE must be > 0")
    if TIME_SCALE not in ("tt", "tai", "tdb", "utc"):
        raise ValueError("TIME_SCALE must be one of tt, tai, tdb, utc")


if VALIDATE_ON_IMPORT:
    validate_settings()
