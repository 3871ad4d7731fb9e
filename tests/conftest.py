import pytest

from flatray.utils.ray_casting import reset_profile_counters
from flatray.utils.tolerance import ToleranceSettings, configure_tolerance


@pytest.fixture(autouse=True)
def default_tolerance():
    configure_tolerance(ToleranceSettings())
    reset_profile_counters()
    yield
    configure_tolerance(ToleranceSettings())
