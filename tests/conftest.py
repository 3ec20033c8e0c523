import os
from typing import Any

from hypothesis import settings

# Property tests run with a small example budget by default; set
# HYPOTHESIS_PROFILE=thorough for a longer fuzzing run of the lexer and parser.
settings.register_profile("dev", max_examples=100, deadline=None)
settings.register_profile("thorough", max_examples=2000, deadline=None)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))

# Coverage in subprocesses; teardown of the collector crashes under act/docker
if os.getenv("COVERAGE_PROCESS_START"):
    import coverage

    coverage.process_startup()

    import coverage.collector

    def safe_stop(self: Any) -> None:
        if self in getattr(self, "_collectors", []):
            self._collectors.remove(self)

    coverage.collector.Collector.stop = safe_stop
