"""CLI entry point — python -m postsmith."""

import argparse
import json
import sys

from .config import run_setup
from .log import set_verbose


def cmd_trending(args):
    from .trending import TrendingAggregator

    snapshot = TrendingAggregator().get_trending()

    if args.json:
        print(json.dumps({"success": True, "data": snapshot.to_dict()}, indent=2))
        return

    limit = args.limit
    print(f"\n  Trending ({snapshot.source}, {snapshot.timestamp:%Y-%m-%d %H:%M}):\n")
    print("  Topics:")
    for i, topic in enumerate(snapshot.topics[:limit], 1):
        print(f"  {i:2d}. {topic}")
    if snapshot.current_events:
        print("\n  Current events:")
        for event in snapshot.current_events[:limit]:
            print(f"   - {event}")
    print(f"\n  Hashtags: {' '.join(snapshot.hashtags[:limit])}")


def cmd_styles(args):
    from .style import list_styles, load_style_corpus

    corpus = load_style_corpus(args.corpus)
    for name in list_styles(corpus):
        print(f"  {name}")


def cmd_generate(args):
    from .generate import generate_content
    from .style import load_style_corpus
    from .trending import TrendingAggregator

    corpus = load_style_corpus(args.corpus)
    aggregator = None if args.no_trending else TrendingAggregator()

    print(f"\n  Generating {args.output_type} about: {args.topic}\n")
    result = generate_content(
        args.topic,
        args.style,
        args.output_type,
        use_trending=not args.no_trending,
        aggregator=aggregator,
        corpus=corpus,
    )
    print(result["content"])
    return result


def main(argv=None):
    import anthropic

    from .generate import OUTPUT_TYPES
    from .style import StyleCorpusError

    parser = argparse.ArgumentParser(
        description="postsmith — trend-aware social content generator",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd")

    # trending
    p_trending = sub.add_parser("trending", help="Show current trending topics")
    p_trending.add_argument("--json", action="store_true", help="Print the snapshot as JSON")
    p_trending.add_argument("--limit", type=int, default=10, help="Max items per section")

    # styles
    p_styles = sub.add_parser("styles", help="List style archetypes")
    p_styles.add_argument("--corpus", default=None, help="Path to style_corpus.json")

    # generate
    p_gen = sub.add_parser("generate", help="Generate a post, thread, or essay")
    p_gen.add_argument("--topic", required=True)
    p_gen.add_argument("--style", required=True, help="Archetype name from the style corpus")
    p_gen.add_argument("--output-type", default="post", choices=sorted(OUTPUT_TYPES))
    p_gen.add_argument("--no-trending", action="store_true", help="Skip trending enrichment")
    p_gen.add_argument("--corpus", default=None, help="Path to style_corpus.json")

    # setup
    sub.add_parser("setup", help="Configure API keys")

    args = parser.parse_args(argv)

    if args.verbose:
        set_verbose(True)

    if not args.cmd:
        parser.print_help()
        return

    try:
        if args.cmd == "trending":
            cmd_trending(args)
        elif args.cmd == "styles":
            cmd_styles(args)
        elif args.cmd == "generate":
            cmd_generate(args)
        elif args.cmd == "setup":
            run_setup()
    except (StyleCorpusError, RuntimeError, anthropic.APIError) as e:
        print(f"  Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
