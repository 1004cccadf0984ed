"""Pipeline entrypoints and result carriers."""

from cldpy.pipeline.entrypoints import load_citizens, load_world, run_check
from cldpy.pipeline.results import CheckRunResult

__all__ = ["CheckRunResult", "load_citizens", "load_world", "run_check"]
