import argparse
import asyncio
import sys
import logging
import aiohttp

from giscus_configurator.config import Settings
from giscus_configurator.infrastructure.github_client import GitHubGraphQLClient
from giscus_configurator.application.lookup_service import RepositoryLookupService
from giscus_configurator.application.configurator import Configurator
from giscus_configurator.application.composer import render_css_snippet
from giscus_configurator.domain.exceptions import RepositoryLookupException
from giscus_configurator.domain.models import Success
from giscus_configurator.domain.options import MAPPING_OPTIONS, THEME_OPTIONS, MappingChoice

logger = logging.getLogger(__name__)

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="giscus-configurator",
        description="Build the giscus <script> tag for a GitHub repository.",
    )
    parser.add_argument("repository", help="public GitHub repository, as owner/repo")
    parser.add_argument("--category", default="", help="discussion category id or name")
    parser.add_argument(
        "--mapping",
        default="pathname",
        choices=[option.value for option in MAPPING_OPTIONS],
        help="page <-> discussion mapping",
    )
    parser.add_argument("--term", default="", help="term or discussion number for the specific/number mappings")
    parser.add_argument("--theme", default="light", choices=[option.value for option in THEME_OPTIONS])
    parser.add_argument("--no-reactions", action="store_true", help="hide reactions for the main post")
    parser.add_argument("--css", action="store_true", help="also print the layout CSS rules")
    args = parser.parse_args(argv)

    # Discussion numbers start at 1; an empty term renders as a placeholder.
    if args.mapping == MappingChoice.NUMBER.value and args.term:
        if not (args.term.isascii() and args.term.isdigit()) or int(args.term) < 1:
            parser.error(f"--term must be a positive discussion number for --mapping number, got {args.term!r}")
    return args

async def main(argv=None) -> int:
    args = parse_args(argv)
    settings = Settings.from_env()

    # Configure logging
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    if not settings.github_token:
        logger.error("GITHUB_TOKEN is not set in the environment.")
        return 1

    github_client = GitHubGraphQLClient(token=settings.github_token, api_url=settings.github_graphql_url)

    async with aiohttp.ClientSession() as session:
        try:
            await github_client.validate_token(session)
        except RepositoryLookupException as e:
            logger.error(f"Cannot authenticate to GitHub: {e}")
            return 1

        lookup_service = RepositoryLookupService(github_client=github_client, session=session)
        configurator = Configurator(lookup_service.lookup_repository, debounce_delay=settings.debounce_delay)
        try:
            configurator.set_repository(args.repository)
            await configurator.settle()

            state = configurator.validator.state
            if not isinstance(state, Success):
                logger.error(configurator.status_message())
                return 1
            logger.info(configurator.status_message())

            if args.category:
                matches = [c.id for c in state.categories if args.category in (c.id, c.name)]
                if not matches:
                    names = ", ".join(c.name for c in state.categories)
                    logger.error(f"No category {args.category!r} in {args.repository}. Available: {names}.")
                    return 1
                configurator.select_category(matches[0])
            else:
                for category in state.categories:
                    logger.info(f"Category available: {category.emoji} {category.name} ({category.id})")

            configurator.set_mapping(args.mapping)
            configurator.set_term(args.term)
            configurator.set_theme(args.theme)
            configurator.set_reactions_enabled(not args.no_reactions)

            print(configurator.snippet)
            if args.css:
                print()
                print(render_css_snippet())
        finally:
            await configurator.aclose()

    return 0

def run() -> None:
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("Interrupted by user. Exiting gracefully.")
        sys.exit(1)

if __name__ == "__main__":
    run()
