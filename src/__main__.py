"""Entry point of the src module. Enables python -m src."""

import argparse
import asyncio
import sys

from src.scraper.fanza import FanzaContext, FanzaSummaryExtractor


def run_summary(movie_id: str) -> int:
    """Look up and print a movie summary."""
    extractor = FanzaSummaryExtractor(FanzaContext.from_settings())

    async def _lookup() -> dict:
        async with extractor.context.client:
            return await extractor.get_summary(movie_id)

    result = asyncio.run(_lookup())

    if not result["summary"]:
        print(f"❌ No summary found for {movie_id}")
        return 1

    print(f"🔗 {result.get('url')}")
    print(result["summary"])
    return 0


def run_normalize(movie_id: str) -> int:
    """Print the content ID for a movie ID."""
    extractor = FanzaSummaryExtractor(FanzaContext.from_settings())
    print(extractor.normalize_movie_id(movie_id))
    return 0


def run_urls(movie_id: str) -> int:
    """Print candidate URLs for a movie ID."""
    extractor = FanzaSummaryExtractor(FanzaContext.from_settings())
    for url in extractor.get_urls_by_id(movie_id):
        print(url)
    return 0


def run_api() -> int:
    """Start the FastAPI server."""
    import uvicorn

    from src.settings import settings

    print("🌐 Starting FastAPI server...")
    uvicorn.run(
        "src.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
    )
    return 0


def main() -> None:
    """Main CLI."""
    parser = argparse.ArgumentParser(
        description="FANZA summary lookup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m src summary ABP-123            # Look up summary
  python -m src normalize ABP-123          # Show content ID
  python -m src urls ABP-123               # Show candidate URLs
  python -m src api                        # Start FastAPI server
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command")

    for name, help_text in (
        ("summary", "Look up a movie summary"),
        ("normalize", "Normalize a movie ID"),
        ("urls", "List candidate detail URLs"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("movie_id", help="Movie ID, e.g. ABP-123")

    subparsers.add_parser("api", help="FastAPI server")

    args = parser.parse_args()

    if args.command == "summary":
        sys.exit(run_summary(args.movie_id))
    elif args.command == "normalize":
        sys.exit(run_normalize(args.movie_id))
    elif args.command == "urls":
        sys.exit(run_urls(args.movie_id))
    elif args.command == "api":
        sys.exit(run_api())
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
