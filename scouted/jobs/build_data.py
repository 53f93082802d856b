"""
Build the Scouted data envelope.

Fetches the latest TFT export, runs the pipeline and writes the JSON
envelope for the site build to consume.

Usage:
    python -m scouted.jobs.build_data --output data/scouted.json
"""

import argparse
import asyncio
import logging
from pathlib import Path

from scouted.config import settings
from scouted.schemas import ScoutedDataResponse
from scouted.services.pipeline import fetch_all_data

logger = logging.getLogger(__name__)


def write_envelope(response: ScoutedDataResponse, output_path: Path) -> Path:
    """Write the envelope as indented JSON, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(response.to_json(indent=2), encoding="utf-8")
    return output_path


async def run_build(output_path: Path) -> Path:
    """
    Run the pipeline once and write its output.

    Args:
        output_path: Where to write the JSON envelope

    Returns:
        Path of the written file
    """
    logger.info("Building Scouted data...")

    try:
        data = await fetch_all_data()
        path = write_envelope(ScoutedDataResponse.from_data(data), output_path)
        logger.info("Wrote %s data (patch %s) to %s", data.build_info.set, data.build_info.patch, path)
        return path
    except Exception as e:
        logger.error("Failed to build Scouted data: %s", e)
        raise


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Build the Scouted TFT data envelope")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(settings.output_path),
        help=f"Output JSON path (default: {settings.output_path})",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run_build(args.output))


if __name__ == "__main__":
    main()
