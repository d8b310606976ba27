from .core import run_query, run_batch, timed, load_or_build
from .io import read_pairs, write_csv, write_manifest

__all__ = ["run_query", "run_batch", "timed", "load_or_build", "read_pairs", "write_csv", "write_manifest"]
