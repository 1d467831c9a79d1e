# features/environment.py
from infrastructure.bdd.environment import (  # noqa: F401
    after_step,
    before_all,
    before_scenario,
    before_step,
)
