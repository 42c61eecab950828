from .core import autosolve, play_session, run_batch
from .io import write_csv, write_rankings, write_manifest

__all__ = ["autosolve", "play_session", "run_batch", "write_csv", "write_rankings", "write_manifest"]
