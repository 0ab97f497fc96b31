import os

from hypothesis import HealthCheck, settings

# The autouse settings-isolation fixture is function scoped but holds no
# per-example state.
settings.register_profile(
    "quick",
    max_examples=100,
    deadline=None,
    derandomize=True,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)


settings.register_profile(
    "nightly",
    max_examples=2000,
    deadline=None,
    derandomize=False,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)

settings.load_profile(os.getenv("MOCKRAND_HYPOTHESIS_PROFILE", "quick"))
