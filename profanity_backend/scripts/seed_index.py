"""
Seed the similarity index with the reference profanity corpus.

Reads a CSV with a `text` column and upserts every non-blank row into the
configured vector store in fixed-size batches. Entry ids are the row
positions, so re-running the script overwrites instead of duplicating.

Run: python -m profanity_backend.scripts.seed_index training_dataset.csv

Dependencies: profanity_backend.boundary.vdb, argparse, csv
"""

import argparse
import csv
import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from profanity_backend.configs import get_settings
from profanity_backend.observability.logger import configure_logging

logger = logging.getLogger(__name__)

BATCH_SIZE = 30


def read_corpus(csv_path: Path, column: str = "text") -> list[str]:
    """
    Load reference texts from a CSV file.

    Raises:
        ValueError: If the column is missing from the header
    """
    with csv_path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None or column not in reader.fieldnames:
            raise ValueError(f"CSV {csv_path} has no '{column}' column")
        return [row[column].strip() for row in reader if (row.get(column) or "").strip()]


def iter_batches(texts: list[str], batch_size: int = BATCH_SIZE) -> Iterator[tuple[int, list[str]]]:
    for start in range(0, len(texts), batch_size):
        yield start, texts[start:start + batch_size]


def seed(store: Any, texts: list[str], batch_size: int = BATCH_SIZE) -> int:
    """
    Upsert texts into the store.

    Args:
        store: Vector store exposing add_texts(texts, metadatas, ids)
        texts: Reference texts
        batch_size: Entries per upsert call

    Returns:
        int: Number of entries written
    """
    written = 0
    for start, batch in iter_batches(texts, batch_size):
        store.add_texts(
            texts=batch,
            metadatas=[{"text": text} for text in batch],
            ids=[str(start + offset) for offset in range(len(batch))],
        )
        written += len(batch)
        logger.info(f"{__name__}:seed - Upserted {written}/{len(texts)} entries")
    return written


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the profanity similarity index.")
    parser.add_argument("csv_path", type=Path, help="CSV file with a 'text' column")
    parser.add_argument("--column", default="text", help="Column holding reference text")
    parser.add_argument("--batch-size", type=int, default=BATCH_SIZE)
    args = parser.parse_args(argv)

    configure_logging(get_settings().log_level)

    if not args.csv_path.exists():
        logger.error(f"{__name__}:main - File not found: {args.csv_path}")
        return 1

    from profanity_backend.boundary.vdb.vector_store_factory import get_vector_store

    texts = read_corpus(args.csv_path, column=args.column)
    written = seed(get_vector_store(), texts, batch_size=args.batch_size)
    logger.info(f"{__name__}:main - Seeded {written} entries from {args.csv_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
