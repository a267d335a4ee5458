import unittest
from unittest.mock import AsyncMock

from giscus_configurator.application.lookup_service import RepositoryLookupService
from giscus_configurator.domain.exceptions import InvalidRepositoryIdentifierException


class TestRepositoryLookupService(unittest.IsolatedAsyncioTestCase):
    async def test_lookup_translates_repository(self) -> None:
        github_client = AsyncMock()
        github_client.fetch_repository = AsyncMock(return_value={
            "id": "R_1",
            "nameWithOwner": "octo/demo",
            "isPrivate": False,
            "hasDiscussionsEnabled": True,
            "discussionCategories": {"nodes": [{"id": "C_1", "emoji": ":speech_balloon:", "name": "General"}]},
        })
        session = object()
        service = RepositoryLookupService(github_client=github_client, session=session)

        lookup = await service.lookup_repository("octo/demo")

        github_client.fetch_repository.assert_awaited_once_with(session, "octo", "demo")
        self.assertEqual(lookup.repository_id, "R_1")
        self.assertEqual(lookup.categories[0].id, "C_1")

    async def test_malformed_identifier_raises_without_request(self) -> None:
        github_client = AsyncMock()
        service = RepositoryLookupService(github_client=github_client, session=object())

        for identifier in ("octo", "octo/", "/demo", "octo/demo/extra"):
            with self.assertRaises(InvalidRepositoryIdentifierException):
                await service.lookup_repository(identifier)

        github_client.fetch_repository.assert_not_called()

    def test_parse_identifier_strips_whitespace(self) -> None:
        self.assertEqual(RepositoryLookupService.parse_identifier(" octo/demo "), ("octo", "demo"))
