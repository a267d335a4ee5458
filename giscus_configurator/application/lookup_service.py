import logging
from typing import Tuple
import aiohttp

from giscus_configurator.infrastructure.github_client import GitHubGraphQLClient
from giscus_configurator.infrastructure.acl import GitHubTranslator
from giscus_configurator.domain.exceptions import InvalidRepositoryIdentifierException
from giscus_configurator.domain.models import RepositoryLookup

logger = logging.getLogger(__name__)


class RepositoryLookupService:
    """
    Resolves a repository identifier to its node id and discussion categories.

    Every failure surfaces as a RepositoryLookupException subclass; callers that
    only care whether the repository is usable can treat them all alike.
    """

    def __init__(self, github_client: GitHubGraphQLClient, session: aiohttp.ClientSession):
        self.github_client = github_client
        self.session = session

    @staticmethod
    def parse_identifier(identifier: str) -> Tuple[str, str]:
        parts = identifier.strip().split("/")
        if len(parts) != 2 or not all(parts):
            raise InvalidRepositoryIdentifierException(identifier)
        return parts[0], parts[1]

    async def lookup_repository(self, identifier: str) -> RepositoryLookup:
        owner, name = self.parse_identifier(identifier)
        logger.info(f"Looking up repository {owner}/{name}.")

        raw_repository = await self.github_client.fetch_repository(self.session, owner, name)
        lookup = GitHubTranslator.to_domain(raw_repository)

        logger.info(f"Repository {owner}/{name} has {len(lookup.categories)} discussion categories.")
        return lookup
