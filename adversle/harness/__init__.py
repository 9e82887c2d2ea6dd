from .core import replay, run_case, run_batch, type_word
from .io import write_csv, write_manifest

__all__ = ["replay", "run_case", "run_batch", "type_word", "write_csv", "write_manifest"]
