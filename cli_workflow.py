#!/usr/bin/env python3
"""
CLI workflow runner for OCR detection transcription.

Provides command-line interface for ranking and transcribing detection
payloads stored as JSON files.
"""
import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from config.settings import settings
from core.constants import OUTCOME_TEXT, RANKING_STRATEGIES
from services.presenters import ConsolePresenter
from services.transcription_service import build_service_from_settings
from spatial.ranking import normalize_strategy, rank_scored_blocks
from utils.detection_utils import DetectionParseError, load_detection_file


def _strategy_arg(value: str) -> str:
    try:
        return normalize_strategy(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def transcribe_file_cli(file_path: str, strategy: str = None) -> int:
    """Transcribe a detection file and print the transcript."""
    try:
        detection = load_detection_file(file_path)
    except DetectionParseError as e:
        print(f"❌ Error: {e}")
        return 1

    service = build_service_from_settings(ConsolePresenter(), strategy)
    outcome = service.handle_success(detection)

    if outcome.status == OUTCOME_TEXT and outcome.dropped_blocks:
        print(f"Note: {outcome.dropped_blocks} block(s) dropped on equal scores")
    return 0


def rank_file_cli(file_path: str, strategy: str = None) -> int:
    """Print the ranked block order of a detection file."""
    try:
        detection = load_detection_file(file_path)
    except DetectionParseError as e:
        print(f"❌ Error: {e}")
        return 1

    strategy = normalize_strategy(strategy or settings.ranking_strategy)
    ranked = rank_scored_blocks(detection.blocks, strategy)

    print(f"\nStrategy: {strategy}")
    print(f"Blocks: {len(ranked)} of {len(detection.blocks)}")
    print("-" * 60)
    print(f"{'#':<4} {'Score':<8} {'Lines':<6} {'Text'}")
    print("-" * 60)

    for i, r in enumerate(ranked, start=1):
        first_line = r.block.text.split('\n')[0]
        if len(first_line) > 40:
            first_line = first_line[:40] + "..."
        print(f"{i:<4} {r.score:<8} {len(r.block.lines):<6} {first_line}")
    return 0


def serve_cli(host: str, port: int) -> int:
    """Run the transcription API with uvicorn."""
    import uvicorn

    uvicorn.run("serving.transcription_api:app", host=host, port=port, log_level=settings.log_level.lower())
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='OCR detection transcription CLI workflow'
    )
    parser.add_argument('--log-level', type=str, default=settings.log_level, help='Logging level')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Transcribe command
    transcribe_parser = subparsers.add_parser('transcribe', help='Print the transcript of a detection file')
    transcribe_parser.add_argument('file', type=str, help='Detection JSON file')
    transcribe_parser.add_argument('--strategy', type=_strategy_arg, help=f"Ranking strategy ({', '.join(RANKING_STRATEGIES)})")

    # Rank command
    rank_parser = subparsers.add_parser('rank', help='Show block order and vertical scores')
    rank_parser.add_argument('file', type=str, help='Detection JSON file')
    rank_parser.add_argument('--strategy', type=_strategy_arg, help=f"Ranking strategy ({', '.join(RANKING_STRATEGIES)})")

    # Serve command
    serve_parser = subparsers.add_parser('serve', help='Run the HTTP API')
    serve_parser.add_argument('--host', type=str, default=settings.api_host, help='Bind host')
    serve_parser.add_argument('--port', type=int, default=settings.api_port, help='Bind port')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if args.command == 'transcribe':
        return transcribe_file_cli(args.file, args.strategy)
    elif args.command == 'rank':
        return rank_file_cli(args.file, args.strategy)
    elif args.command == 'serve':
        return serve_cli(args.host, args.port)
    else:
        parser.print_help()
        return 0


if __name__ == '__main__':
    sys.exit(main())
