import logging

import matplotlib

matplotlib.use("Agg")

import pytest

from nbody_ephemeris.config.settings import configure_logging


@pytest.fixture(autouse=True, scope="session")
def _logging():
    configure_logging("DEBUG")
    logging.getLogger("matplotlib").setLevel(logging.WARNING)
