import asyncio
import unittest

from giscus_configurator.application.configurator import (
    ERROR_MESSAGE,
    HINT_MESSAGE,
    SUCCESS_MESSAGE,
    Configurator,
)
from giscus_configurator.domain.exceptions import RepositoryNotEligibleException
from giscus_configurator.domain.models import Category, Error, Idle, RepositoryLookup, Success
from giscus_configurator.domain.options import MappingChoice, Theme

DELAY = 0.02


class _FakeLookupService:
    def __init__(self, results) -> None:
        self.results = results
        self.calls = []

    async def lookup_repository(self, identifier: str) -> RepositoryLookup:
        self.calls.append(identifier)
        result = self.results[identifier]
        if isinstance(result, Exception):
            raise result
        return result


class TestConfigurator(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self) -> None:
        self.service = _FakeLookupService({
            "octo/demo": RepositoryLookup(
                repository_id="R_1",
                categories=[Category(id="C_1", emoji="💬", name="General")],
            ),
            "octo/private": RepositoryNotEligibleException("octo/private", "repository is private"),
        })
        self.configurator = Configurator(self.service.lookup_repository, debounce_delay=DELAY)

    async def asyncTearDown(self) -> None:
        await self.configurator.aclose()

    async def test_end_to_end_snippet(self) -> None:
        for typed in ("o", "octo", "octo/", "octo/demo"):
            self.configurator.set_repository(typed)
        await self.configurator.settle()

        self.assertEqual(self.service.calls, ["octo/demo"])
        self.assertIsInstance(self.configurator.validator.state, Success)
        self.assertEqual(self.configurator.status_message(), SUCCESS_MESSAGE)

        self.configurator.select_category("C_1")
        self.configurator.set_mapping("pathname")
        snippet = self.configurator.snippet

        self.assertIn('data-repo="octo/demo"', snippet)
        self.assertIn('data-repo-id="R_1"', snippet)
        self.assertIn('data-category-id="C_1"', snippet)
        self.assertIn('data-mapping="pathname"', snippet)
        self.assertNotIn("data-term", snippet)

    async def test_snippet_uses_placeholders_before_lookup(self) -> None:
        self.assertEqual(self.configurator.status_message(), HINT_MESSAGE)
        snippet = self.configurator.snippet

        self.assertIn('data-repo="[ENTER REPO HERE]"', snippet)
        self.assertIn('data-repo-id="[ENTER REPO ID HERE]"', snippet)

    async def test_ineligible_repository_reports_error(self) -> None:
        self.configurator.set_repository("octo/private")
        await self.configurator.settle()

        self.assertIsInstance(self.configurator.validator.state, Error)
        self.assertEqual(self.configurator.status_message(), ERROR_MESSAGE)
        self.assertIn('data-repo="octo/private"', self.configurator.snippet)
        self.assertIn('data-repo-id="[ENTER REPO ID HERE]"', self.configurator.snippet)

    async def test_editing_repository_clears_category(self) -> None:
        self.configurator.set_repository("octo/demo")
        await self.configurator.settle()
        self.configurator.select_category("C_1")

        self.configurator.set_repository("")
        await self.configurator.settle()

        self.assertIsInstance(self.configurator.validator.state, Idle)
        self.assertIn('data-category-id="[ENTER CATEGORY ID HERE]"', self.configurator.snippet)

    async def test_retyping_same_repository_keeps_selection(self) -> None:
        self.configurator.set_repository("octo/demo")
        await self.configurator.settle()
        self.configurator.select_category("C_1")

        self.configurator.set_repository("octo/demox")
        self.configurator.set_repository("octo/demo")
        await self.configurator.settle()

        self.assertEqual(self.service.calls, ["octo/demo"])
        self.assertEqual(self.configurator.validator.category_id, "C_1")
        self.assertIn('data-category-id="C_1"', self.configurator.snippet)

    async def test_mapping_change_mid_lookup_keeps_state_consistent(self) -> None:
        self.configurator.set_repository("octo/demo")
        await asyncio.sleep(DELAY / 4)
        self.configurator.set_mapping(MappingChoice.NUMBER)
        self.configurator.set_term("7")
        await self.configurator.settle()

        snippet = self.configurator.snippet
        self.assertIn('data-repo-id="R_1"', snippet)
        self.assertIn('data-term="7"', snippet)

    async def test_direct_toggles(self) -> None:
        self.configurator.set_theme("dark_dimmed")
        self.configurator.set_reactions_enabled(False)

        configuration = self.configurator.configuration
        self.assertEqual(configuration.theme, Theme.DARK_DIMMED)
        self.assertFalse(configuration.reactions_enabled)
        self.assertIn('data-reactions-enabled="0"', self.configurator.snippet)
