"""Command line interface for the social share generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .config import load_config
from .models import CallToAction, Tone
from .service import handle_generate


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Generate social posts from a blog article")
    parser.add_argument("--url", help="Blog post URL to fetch")
    parser.add_argument("--title", help="Title override")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--text", help="Article text or summary to use instead of (or as fallback for) the URL")
    source.add_argument("--text-file", help="Path to a file containing the article text")
    parser.add_argument("--tone", choices=[tone.value for tone in Tone], default=Tone.PROFESSIONAL.value)
    parser.add_argument("--cta", choices=[cta.value for cta in CallToAction], default=CallToAction.READ_NOW.value)
    parser.add_argument("--audience", help="Audience focus, e.g. 'SaaS marketers'")
    parser.add_argument("--hashtags", help="Comma separated hashtags")
    parser.add_argument("--verbose", action="store_true", help="Log pipeline steps to stderr")
    return parser.parse_args(argv)


def main(argv=None):
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
    )
    text = args.text
    if args.text_file:
        with open(args.text_file, "r", encoding="utf-8") as handle:
            text = handle.read()
    payload = {
        "url": args.url or "",
        "fallbackTitle": args.title,
        "customSummary": text,
        "tone": args.tone,
        "callToAction": args.cta,
        "audience": args.audience,
        "customHashtags": [item.strip() for item in args.hashtags.split(",") if item.strip()] if args.hashtags else None,
    }
    response = handle_generate(payload, config=load_config())
    print(json.dumps(response.body, indent=2, ensure_ascii=False))
    return 0 if response.ok else 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
