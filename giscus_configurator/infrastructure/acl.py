from typing import Any, Dict
from giscus_configurator.domain.exceptions import RepositoryNotEligibleException
from giscus_configurator.domain.models import Category, RepositoryLookup

class GitHubTranslator:
    """
    Anti-corruption layer that translates raw GitHub GraphQL repository nodes into RepositoryLookup instances.
    """

    @staticmethod
    def to_domain(raw_repository: Dict[str, Any]) -> RepositoryLookup:
        """
        Transforms a raw GitHub GraphQL repository node into a RepositoryLookup.

        Args:
            raw_repository (Dict[str, Any]): The raw JSON repository node from GitHub's GraphQL response.

        Returns:
            RepositoryLookup: The repository id and its discussion categories, in GitHub's order.

        Raises:
            RepositoryNotEligibleException: The repository is private or has discussions turned off.
        """
        name = raw_repository.get('nameWithOwner', '')

        if raw_repository.get('isPrivate', False):
            raise RepositoryNotEligibleException(name, "repository is private")
        if not raw_repository.get('hasDiscussionsEnabled', True):
            raise RepositoryNotEligibleException(name, "discussions are disabled")

        repository_id = raw_repository.get('id')
        if not repository_id:
            raise ValueError("id is required to build RepositoryLookup.")

        nodes = (raw_repository.get('discussionCategories') or {}).get('nodes') or []

        return RepositoryLookup(
            repository_id=repository_id,
            categories=[
                Category(
                    id=node.get('id', ''),
                    emoji=node.get('emoji') or '',
                    name=node.get('name', ''),
                )
                for node in nodes if node
            ],
        )
