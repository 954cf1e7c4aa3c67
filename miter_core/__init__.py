"""Cut-list reporting and command line tools built on ``miter_sketch``."""
from .cutlist import BoardReport, build_cut_list, canonical_frames, load_sketch

__all__ = ["BoardReport", "build_cut_list", "canonical_frames", "load_sketch"]
