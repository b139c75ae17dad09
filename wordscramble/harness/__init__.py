from .core import replay, autoplay, summarize
from .io import write_csv, write_manifest

__all__ = ["replay", "autoplay", "summarize", "write_csv", "write_manifest"]
