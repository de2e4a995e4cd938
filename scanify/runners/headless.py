"""Headless batch processing runner."""

import os
import sys
from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Deque, List, Optional, Tuple

import numpy as np
from tqdm import tqdm

from ..config import ProcessingConfig
from ..core.io import PageImageReader, PageImageWriter, Rasterizer, Reassembler
from ..effects.pipeline import EffectPipeline, build_pipeline


def page_generators(count: int, seed: Optional[int] = None) -> List[np.random.Generator]:
    """Create one independent random generator per page.

    Args:
        count: Number of pages.
        seed: Batch seed; None draws fresh OS entropy.

    Returns:
        List of generators, one per page, stable for a given seed.
    """
    sequence = np.random.SeedSequence(seed)
    return [np.random.default_rng(child) for child in sequence.spawn(count)]


def resolve_workers(workers: Optional[int]) -> int:
    """Worker count for the page pool (defaults to the CPU count)."""
    if workers is None:
        return os.cpu_count() or 1
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    return workers


def process_page(
    pipeline: EffectPipeline,
    reader: Rasterizer,
    writer: Reassembler,
    input_path: str,
    output_path: str,
    rng: np.random.Generator,
) -> str:
    """Read, transform and write a single page.

    Returns:
        The output path.
    """
    frame = reader.read_page(input_path)
    output = pipeline.apply(frame, rng)
    writer.write_page(output, output_path)
    return output_path


def describe_features(config: ProcessingConfig) -> List[str]:
    preset = config.preset
    features = []
    if preset.apply_warp:
        features.append(f"warp ({preset.warp_strategy.value})")
    if preset.apply_dust:
        features.append("dust")
    return features


def run_headless(
    config: ProcessingConfig,
    reader: Optional[Rasterizer] = None,
    writer: Optional[Reassembler] = None,
) -> List[str]:
    """Run headless batch processing.

    Pages are processed on a thread pool with at most two pages per worker in
    flight, so only a bounded number of full-resolution rasters are alive at
    any time.

    Args:
        config: Processing configuration.
        reader: Page source (defaults to PageImageReader).
        writer: Page sink (defaults to PageImageWriter at the configured DPI).

    Returns:
        Output paths in input order.

    Raises:
        ValueError: If the configuration is invalid or two pages would write
            the same output file.
        IOError: If a page cannot be read or written.
    """
    collisions = config.output_collisions()
    if collisions:
        target, sources = next(iter(collisions.items()))
        raise ValueError(
            f"Pages {', '.join(sources)} would all be written to {target}"
        )

    pipeline = build_pipeline(config.preset)
    reader = reader or PageImageReader()
    writer = writer or PageImageWriter(dpi=config.output.dpi)
    workers = resolve_workers(config.workers)

    jobs = [(path, config.output_path_for(path)) for path in config.input_paths]
    rngs = page_generators(len(jobs), config.seed)

    print(f"Pages: {len(jobs)}")
    print(f"Preset: {config.preset.name}")
    features = describe_features(config)
    if features:
        print(f"Enabled features: {', '.join(features)}")

    written: List[str] = []
    pending: Deque[Tuple[str, Future]] = deque()
    queue = iter(zip(jobs, rngs))

    with ThreadPoolExecutor(max_workers=workers) as executor:

        def submit_next() -> None:
            try:
                (input_path, output_path), rng = next(queue)
            except StopIteration:
                return
            future = executor.submit(
                process_page, pipeline, reader, writer, input_path, output_path, rng
            )
            pending.append((input_path, future))

        for _ in range(workers * 2):
            submit_next()

        with tqdm(total=len(jobs), desc="Processing") as progress:
            while pending:
                input_path, future = pending.popleft()
                try:
                    written.append(future.result())
                except BaseException:
                    print(f"Failed to process page: {input_path}", file=sys.stderr)
                    for _, other in pending:
                        other.cancel()
                    raise
                progress.update(1)
                submit_next()

    if written:
        print(f"Output saved to: {os.path.dirname(os.path.abspath(written[0]))}")
    return written
