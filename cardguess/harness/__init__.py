from .core import run_case, run_batch, select_cases
from .io import write_csv, write_manifest
from .stats import summarize, pretty_summary

__all__ = ["run_case", "run_batch", "select_cases", "write_csv", "write_manifest",
           "summarize", "pretty_summary"]
