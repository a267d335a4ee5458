import aiohttp
import asyncio
import logging
import random
from typing import Dict, Any

from giscus_configurator.domain.exceptions import (
    RateLimitExceededException,
    RepositoryLookupException,
    RepositoryNotFoundException,
)

logger = logging.getLogger(__name__)

# Fetches what giscus needs to know about a repository: its node id,
# whether it can host discussions, and the discussion categories in
# the order GitHub lists them.
REPOSITORY_QUERY = """
query ($owner: String!, $name: String!) {
  repository(owner: $owner, name: $name) {
    id
    nameWithOwner
    isPrivate
    hasDiscussionsEnabled
    discussionCategories(first: 100) {
      nodes {
        id
        emoji
        name
      }
    }
  }
  rateLimit {
    cost
    remaining
    resetAt
  }
}
"""

VIEWER_QUERY = "query { viewer { login } }"

DEFAULT_API_URL = "https://api.github.com/graphql"
REQUEST_TIMEOUT = aiohttp.ClientTimeout(total=20, connect=5)
# Lookups are interactive, so give up much sooner than a batch job would.
MAX_RETRIES = 3
MIN_REMAINING_POINTS = 10

class GitHubGraphQLClient:
    """
    Client for interacting with the GitHub GraphQL API.
    Handles authentication, query execution, and rate limit management.
    """

    def __init__(self, token: str, api_url: str = DEFAULT_API_URL):
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": "giscus-configurator",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        self.api_url = api_url

    async def validate_token(self, session: aiohttp.ClientSession) -> str:
        """
        Checks that the configured token is accepted by GitHub.

        Returns:
            str: The login of the token owner.
        """
        data = await self._execute(session, VIEWER_QUERY, {})
        login = (data.get('data') or {}).get('viewer', {}).get('login', '')
        logger.info(f"Authenticated to GitHub as {login}.")
        return login

    async def fetch_repository(
        self,
        session: aiohttp.ClientSession,
        owner: str,
        name: str,
    ) -> Dict[str, Any]:
        """
        Fetches the raw repository node for owner/name.

        Raises:
            RepositoryNotFoundException: GitHub has no repository visible under that name.
            RateLimitExceededException: The remaining GraphQL budget is nearly spent.
            RepositoryLookupException: The request kept failing after all retries.
        """
        data = await self._execute(session, REPOSITORY_QUERY, {"owner": owner, "name": name})

        rate_limit = (data.get('data') or {}).get('rateLimit') or {}
        remaining = rate_limit.get('remaining', 100)
        if remaining < MIN_REMAINING_POINTS:
            raise RateLimitExceededException(reset_at=rate_limit.get('resetAt'))

        repository = (data.get('data') or {}).get('repository')
        if repository is None:
            raise RepositoryNotFoundException(f"{owner}/{name}")
        return repository

    async def _execute(
        self,
        session: aiohttp.ClientSession,
        query: str,
        variables: Dict[str, Any],
    ) -> Dict[str, Any]:
        payload = {"query": query, "variables": variables}

        for attempt in range(MAX_RETRIES):
            try:
                async with session.post(self.api_url, json=payload, headers=self.headers, timeout=REQUEST_TIMEOUT) as response:
                    if response.status == 401:
                        raise RepositoryLookupException("GitHub rejected the token (401).")

                    # Handle secondary rate limit (abuse detection)
                    if response.status == 403:
                        retry_after = response.headers.get('Retry-After')
                        sleep_time = int(retry_after) if retry_after else 60
                        logger.warning(f"Secondary rate limit (403). Sleeping {sleep_time}s...")
                        await asyncio.sleep(sleep_time)
                        continue

                    if response.status in {500, 502, 503, 504}:
                        sleep_time = (2 ** attempt) + random.uniform(0, 1)
                        logger.warning(
                            f"Server error ({response.status}). "
                            f"Retrying in {sleep_time:.1f}s (attempt {attempt + 1}/{MAX_RETRIES})..."
                        )
                        await asyncio.sleep(sleep_time)
                        continue

                    response.raise_for_status()
                    data = await response.json()

                    # GraphQL-level errors can occur even with HTTP 200. A missing
                    # repository comes back as NOT_FOUND with a null node, which the
                    # caller handles, so only log it here.
                    if 'errors' in data:
                        error = data['errors'][0]
                        error_msg = error.get('message', 'Unknown GraphQL error')
                        if error.get('type') == 'NOT_FOUND':
                            logger.debug(f"GraphQL not found: {error_msg}")
                        elif 'data' not in data or data['data'] is None:
                            raise RepositoryLookupException(f"GraphQL error: {error_msg}")
                        else:
                            logger.warning(f"GraphQL partial error: {error_msg}")

                    return data

            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                sleep_time = (2 ** attempt) + random.uniform(0, 1)
                logger.warning(
                    f"Request failed (attempt {attempt + 1}/{MAX_RETRIES}): {e}. "
                    f"Retrying in {sleep_time:.1f}s..."
                )
                await asyncio.sleep(sleep_time)

        raise RepositoryLookupException(f"GitHub request failed after {MAX_RETRIES} attempts.")
