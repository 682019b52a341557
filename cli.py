import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from publish_core.config_manager import ConfigManager
from publish_core.errors import PublishCoreError
from publish_core.ingestion.fetcher import MediaFetcher
from publish_core.ingestion.models import Monetization, UploadRequest
from publish_core.packaging.models import Category
from publish_core.pipeline import PipelineManager
from publish_core.utils.logger import setup_logger_from_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Autopublish CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    process_parser = subparsers.add_parser("process", help="Generate metadata and publish a video")

    # Inputs
    source = process_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", help="Path to a local video file")
    source.add_argument("--url", help="Direct video URL")

    # Options
    process_parser.add_argument("--category", choices=[c.value for c in Category], default="tech")
    process_parser.add_argument("--language", default="en", help="ISO language code, e.g. en or en-US")
    process_parser.add_argument("--monetization", choices=[m.value for m in Monetization], default="enabled")
    process_parser.add_argument("--schedule", help="Publish time, e.g. 2024-06-01T10:00 (UTC)")
    process_parser.add_argument("--dry-run", action="store_true", help="Print metadata, skip the upload")
    process_parser.add_argument("--config", default="config/settings.yaml", help="Path to settings.yaml")
    return parser


def main(argv=None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        config = ConfigManager(args.config)
    except Exception as e:
        print(f"Config Error: {e}")
        return 1

    logger = setup_logger_from_config(config)

    try:
        request = UploadRequest(
            category=args.category,
            language=args.language,
            monetization=args.monetization,
            schedule_time=args.schedule,
        )
    except ValidationError as e:
        print(f"Error: {', '.join(err['msg'] for err in e.errors())}")
        return 1

    pipeline = PipelineManager(config)
    try:
        if args.dry_run:
            label = Path(args.file).name if args.file else args.url
            prepared = pipeline.preview(label, request)
            print(json.dumps(prepared.model_dump(mode="json"), indent=2, ensure_ascii=False))
            print("[DRY RUN] Skipping actual upload.")
            return 0

        media = MediaFetcher(config).resolve(file_path=args.file, url=args.url)
        try:
            summary = pipeline.run(media, request)
        finally:
            media.close()
    except PublishCoreError as e:
        logger.error(f"Publish failed: {e}")
        print(f"Error: {e}")
        return 1

    print(json.dumps(summary.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
