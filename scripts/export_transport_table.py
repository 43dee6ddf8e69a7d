"""Write the vehicle CH4/N2O combination table to CSV."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pandas as pd

from ghgcalc.transport import CombinationTable, load_transport_config
from ghgcalc.transport.config import default_transport_config

OUTPUT_PATH = Path(__file__).resolve().parents[1] / "data" / "transport_combinations.csv"

logger = logging.getLogger(__name__)


def build_frame(factors_path: Path | None = None) -> pd.DataFrame:
    """Return the annotated table, optionally from an override factor file."""
    config = load_transport_config(factors_path) if factors_path else default_transport_config()
    return CombinationTable(config.factors, config.labels).to_frame()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--factors", type=Path, default=None, help="JSON or YAML factor file")
    parser.add_argument("--output", type=Path, default=OUTPUT_PATH)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    frame = build_frame(args.factors)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    frame.to_csv(args.output, index=False, encoding="utf-8-sig")
    logger.info("Wrote %d rows to %s", len(frame), args.output)


if __name__ == "__main__":
    main()
