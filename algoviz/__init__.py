"""Step-by-step algorithm visualizer: step generator and playback controller."""

from .generator import generate  # noqa: F401
from .playback import PlaybackController  # noqa: F401
from .api import (  # noqa: F401
    generate_sample,
    list_samples,
    dump_trace,
    trace_to_json,
)
