"""Command-line entry point: landing page, segregation guide, waste detection."""

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import List

from tqdm import tqdm

from wastesort.classification.service import WasteClassifier
from wastesort.config.loader import configure_from_cli
from wastesort.config.resolvers import resolve_image_inputs
from wastesort.config.settings import Settings, set_settings
from wastesort.domain.exceptions import ConfigurationError, PipelineConfigurationError
from wastesort.presentation.render import render_guide, render_home, render_result
from wastesort.results.assemblers import summary_line
from wastesort.upload.flow import AnalysisOutcome, UploadAnalysis
from wastesort.utils.logging import setup_logging
from wastesort.utils.suppress import setup_clean_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the wastesort CLI."""
    parser = argparse.ArgumentParser(
        prog="wastesort",
        description=(
            "Learn to segregate waste and classify photos of waste as wet, "
            "dry or hazardous."
        ),
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("about", help="Show why waste segregation matters")

    guide_p = sub.add_parser("guide", help="Show the waste segregation guide")
    toggle = guide_p.add_mutually_exclusive_group()
    toggle.add_argument("--dry-only", action="store_true", help="Show dry waste examples only.")
    toggle.add_argument("--wet-only", action="store_true", help="Show wet waste examples only.")

    run_p = sub.add_parser("classify", help="Classify one or more waste photos")

    mx = run_p.add_mutually_exclusive_group(required=True)
    mx.add_argument(
        "-i",
        "--input",
        nargs="+",
        help="Image files to classify (photo1.jpg photo2.png ...)",
    )
    mx.add_argument(
        "-d",
        "--input-dir",
        type=str,
        help="Directory of images to classify (optionally recursive).",
    )
    run_p.add_argument(
        "-R",
        "--recursive",
        action="store_true",
        help="With --input-dir, search subdirectories recursively.",
    )
    run_p.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON lines instead of text.",
    )

    model_group = run_p.add_argument_group("Model Options")
    model_group.add_argument(
        "--no-model",
        action="store_true",
        help="Skip the pretrained model and use the pixel heuristic only.",
    )
    model_group.add_argument(
        "--model-cache",
        type=str,
        metavar="DIR",
        help="Directory for downloaded model weights (default: user cache dir).",
    )
    model_group.add_argument(
        "--min-score",
        type=float,
        metavar="X",
        help="Minimum top model score before falling back to the pixel heuristic.",
    )
    model_group.add_argument(
        "--dark-brightness-max",
        type=float,
        metavar="X",
        help="Mean brightness (0-255) under which dark images count as electronic.",
    )
    model_group.add_argument(
        "--seed",
        type=int,
        metavar="N",
        help="Seed the item-subset and confidence jitter for repeatable output.",
    )

    upload_group = run_p.add_argument_group("Upload Options")
    upload_group.add_argument(
        "--max-size-mb",
        type=float,
        metavar="MB",
        help="Reject files larger than this (default: 5).",
    )

    debug_group = run_p.add_argument_group("Debug Options")
    debug_group.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode with verbose logging.",
    )
    debug_group.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate configuration and list inputs without classifying.",
    )
    debug_group.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write the log to this file instead of ./logs/wastesort_<timestamp>.log.",
    )

    return parser


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the wastesort CLI."""
    args = build_parser().parse_args(argv)

    if args.cmd == "about":
        print(render_home())
        sys.exit(0)

    if args.cmd == "guide":
        print(render_guide(show_dry=not args.wet_only, show_wet=not args.dry_only))
        sys.exit(0)

    if args.cmd != "classify":
        logging.error("Unknown command: %s", args.cmd)
        sys.exit(2)

    settings = None
    try:
        settings = configure_from_cli(args)
        set_settings(settings)

        logger, summary_logger = setup_logging(
            log_file=str(settings.logging.file_path) if settings.logging.file_path else None,
            console=settings.logging.console_output,
            level=settings.logging.level.value,
            file_format=settings.logging.format_string,
            console_level="DEBUG" if settings.debug_mode else "WARNING",
        )
        setup_clean_logging()

        if settings.debug_mode:
            logger.debug("Configuration details:")
            for section, values in settings.to_dict().items():
                logger.debug("  %s: %s", section, values)

        try:
            inputs = resolve_image_inputs(
                files=settings.input_files or None,
                directory=settings.input_directory,
                recursive=settings.recursive,
                extensions=settings.upload.extensions,
            )
        except ValueError as e:
            raise ConfigurationError(str(e), config_field="input").add_suggestion(
                "Check the paths and image extensions"
            ) from e

        logger.info("Classifying %s image(s); model tier %s",
                    len(inputs), "enabled" if settings.model.enabled else "disabled")

        if settings.dry_run:
            _print_dry_run_summary(settings, inputs)
            sys.exit(0)

        outcomes = asyncio.run(_analyze_all(settings, inputs))

        rejected = 0
        for outcome in outcomes:
            if settings.output_json:
                print(json.dumps(outcome.to_dict()))
            elif outcome.success:
                print(render_result(outcome.result, title=f"Analysis Results: {outcome.path}"))
                print()
            else:
                print(f"Rejected {outcome.path}: {outcome.error.message}", file=sys.stderr)
                for suggestion in outcome.error.suggestions:
                    print(f"  - {suggestion}", file=sys.stderr)

            if outcome.success:
                summary_logger.info("%s: %s", outcome.path, summary_line(outcome.result))
            else:
                rejected += 1

        summary_logger.info("Classified %s, rejected %s", len(outcomes) - rejected, rejected)
        sys.exit(2 if rejected else 0)

    except (ConfigurationError, PipelineConfigurationError) as e:
        logging.error("Configuration error: %s", e.message)
        if getattr(e, "suggestions", None):
            logging.error("Suggestions:")
            for suggestion in e.suggestions:
                logging.error("  - %s", suggestion)
        sys.exit(1)

    except KeyboardInterrupt:
        logging.info("Classification interrupted by user")
        sys.exit(130)

    except Exception as e:
        logging.error("Classification failed: %s", e)
        if settings is not None and settings.debug_mode:
            logging.exception("Full traceback:")
        sys.exit(1)


async def _analyze_all(settings: Settings, inputs: List[str]) -> List[AnalysisOutcome]:
    """Analyse inputs one after another, with a progress bar for batches."""
    classifier = WasteClassifier(settings)
    analysis = UploadAnalysis(classifier)

    show_progress = (
        len(inputs) > 1
        and not settings.output_json
        and os.getenv('NO_PROGRESS', '').lower() not in ['1', 'true', 'yes']
    )
    outcomes = []
    with tqdm(total=len(inputs), desc="Classifying", unit="img", disable=not show_progress) as pbar:
        for path in inputs:
            outcomes.append(await analysis.analyze(path))
            pbar.set_postfix_str(Path(path).name)
            pbar.update(1)
    return outcomes


def _print_dry_run_summary(settings: Settings, inputs: List[str]) -> None:
    """Print a summary for dry run mode."""
    print("\n" + "=" * 60)
    print("DRY RUN SUMMARY")
    print("=" * 60)
    print(f"Input images:       {len(inputs):,}")
    print(f"Model tier:         {settings.model.architecture if settings.model.enabled else 'disabled'}")
    print(f"Model cache:        {settings.model.cache_dir or 'Default'}")
    print(f"Min model score:    {settings.model.min_score}")
    print(f"Max upload size:    {settings.upload.max_bytes:,} bytes")
    print(f"Seed:               {settings.seed}")
    print(f"Debug mode:         {settings.debug_mode}")
    print("=" * 60)

    if inputs:
        print("Example input files:")
        for i, path in enumerate(inputs[:5]):
            print(f"  {i + 1}. {path}")
        if len(inputs) > 5:
            print(f"  ... and {len(inputs) - 5} more")
    print()


if __name__ == "__main__":
    main()
