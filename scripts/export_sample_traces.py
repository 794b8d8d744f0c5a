"""Generate step traces for the built-in samples and write them as JSON.

Usage:
    python scripts/export_sample_traces.py                 # every sample
    python scripts/export_sample_traces.py bubble_sort linear_search

Writes each trace to traces/<sample>.json, ready for an external renderer,
and logs the per-sample generation statistics.
"""

import logging
import sys
from pathlib import Path

# Ensure repo root is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from algoviz.api import generate_sample, trace_to_json
from algoviz.samples import SAMPLES

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

OUTPUT_DIR = Path(__file__).parent.parent / "traces"


def export_sample(name: str) -> Path:
    """Generate *name*'s trace and write it to the output directory."""
    trace = generate_sample(name)
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    out_path = OUTPUT_DIR / f"{name}.json"
    out_path.write_text(trace_to_json(trace) + "\n", encoding="utf-8")
    logger.info(
        "Wrote %s (%s, %d steps)", out_path, trace.shape.value, len(trace)
    )
    return out_path


def main(names: list[str]) -> None:
    for name in names:
        export_sample(name)
    logger.info("Done - exported %d sample(s)", len(names))


if __name__ == "__main__":
    main(sys.argv[1:] or list(SAMPLES))
