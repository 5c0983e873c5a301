import pytest

from kernel_settings import KernelSettings, configure_kernel, reset_profile_counters


@pytest.fixture(autouse=True)
def default_kernel_settings():
    """Every test starts from the default tolerance and zeroed counters."""
    configure_kernel(KernelSettings())
    reset_profile_counters()
    yield
    configure_kernel(KernelSettings())
    reset_profile_counters()
