#!/usr/bin/env python3
"""Showcase of sfc_pipeline features.

Splits every ``*.vue`` file below a source directory into one file per
section kind and writes the results to an output directory. Demonstrates:
  • Settings and logging configuration (SFC_* environment variables)
  • SourceDocument loading from disk
  • A custom ``<config>`` section kind with a multi-part extension
  • Per-language sub-compilers forwarded through PipelineOptions
  • An output modifier wrapping plain scripts
  • ComponentPipeline.run with a LocalArtifactSink and a PipelineReport

Usage:
  python examples/showcase.py ./src ./dist

  # Verbose pipeline logs
  SFC_PIPELINE_LOG_LEVEL=DEBUG python examples/showcase.py ./src ./dist
"""

import argparse
import asyncio
import sys
from pathlib import Path

from sfc_pipeline import (
    ComponentPipeline,
    LocalArtifactSink,
    LoggingConfig,
    PipelineOptions,
    SourceDocument,
    get_pipeline_logger,
    settings,
)

logger = get_pipeline_logger("sfc_pipeline.showcase")


def config_extension(lang: str | None, path: str | None, node) -> str:
    """``<config lang="php">`` becomes ``Name.config.php``; anything else ``Name.ini``."""
    return "config.php" if lang == "php" else "ini"


def compile_config(tag: str, content: str, lang: str | None, path: str | None) -> str:
    if lang == "php":
        return "<?php\n" + content.strip() + "\n"
    return content.strip()


def strip_scss_comments(content: str, path: str | None) -> str:
    # Stand-in for a real SCSS compiler
    return "\n".join(line for line in content.splitlines() if not line.lstrip().startswith("//"))


def wrap_plain_script(content: str, lang: str | None) -> str:
    if lang:
        return content
    return f"(function () {{\n{content}\n}})();\n"


async def load_documents(source_dir: Path) -> list[SourceDocument]:
    paths = sorted(source_dir.rglob("*.vue"))
    return list(await asyncio.gather(*[SourceDocument.from_path(p, base=source_dir) for p in paths]))


async def showcase(source_dir: Path, output_dir: Path) -> int:
    options = PipelineOptions(
        tags={"config": config_extension},
        custom_compilers={"config": compile_config},
        output_modifiers={"script": wrap_plain_script},
        compilers={"scss": strip_scss_comments},
    )
    pipeline = ComponentPipeline(options)
    documents = await load_documents(source_dir)
    logger.info(f"Splitting {len(documents)} components with up to {settings.max_concurrent_documents} in flight")

    report = await pipeline.run(documents, LocalArtifactSink(output_dir))

    for outcome in report.outcomes:
        names = ", ".join(artifact.name for artifact in outcome.artifacts) or "-"
        print(f"{outcome.status.value:8} {outcome.path}: {names}")
    if not report.ok:
        for outcome in report.failed:
            print(f"\n{outcome.error}", file=sys.stderr)
        return 1
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Split single file components into per-section files")
    parser.add_argument("source_dir", type=Path)
    parser.add_argument("output_dir", type=Path)
    args = parser.parse_args()

    LoggingConfig().apply()
    sys.exit(asyncio.run(showcase(args.source_dir, args.output_dir)))


if __name__ == "__main__":
    main()
