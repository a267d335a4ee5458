import unittest

from pydantic import ValidationError

from giscus_configurator.domain.exceptions import RepositoryNotEligibleException
from giscus_configurator.infrastructure.acl import GitHubTranslator


def _raw_repository(**overrides):
    raw = {
        "id": "R_1",
        "nameWithOwner": "octo/demo",
        "isPrivate": False,
        "hasDiscussionsEnabled": True,
        "discussionCategories": {
            "nodes": [
                {"id": "C_2", "emoji": ":bulb:", "name": "Ideas"},
                {"id": "C_1", "emoji": ":speech_balloon:", "name": "General"},
            ]
        },
    }
    raw.update(overrides)
    return raw


class TestGitHubTranslator(unittest.TestCase):
    def test_to_domain_keeps_category_order(self) -> None:
        lookup = GitHubTranslator.to_domain(_raw_repository())

        self.assertEqual(lookup.repository_id, "R_1")
        self.assertEqual([c.id for c in lookup.categories], ["C_2", "C_1"])
        self.assertEqual(lookup.categories[1].name, "General")
        self.assertEqual(lookup.categories[1].emoji, ":speech_balloon:")

    def test_missing_categories_yield_empty_list(self) -> None:
        lookup = GitHubTranslator.to_domain(_raw_repository(discussionCategories=None))

        self.assertEqual(lookup.categories, [])

    def test_private_repository_is_not_eligible(self) -> None:
        with self.assertRaises(RepositoryNotEligibleException) as ctx:
            GitHubTranslator.to_domain(_raw_repository(isPrivate=True))

        self.assertIn("private", ctx.exception.reason)

    def test_disabled_discussions_are_not_eligible(self) -> None:
        with self.assertRaises(RepositoryNotEligibleException):
            GitHubTranslator.to_domain(_raw_repository(hasDiscussionsEnabled=False))

    def test_missing_id_raises(self) -> None:
        raw = _raw_repository()
        del raw["id"]

        with self.assertRaises(ValueError):
            GitHubTranslator.to_domain(raw)

    def test_duplicate_category_ids_are_rejected(self) -> None:
        nodes = [{"id": "C_1", "emoji": "", "name": "A"}, {"id": "C_1", "emoji": "", "name": "B"}]

        with self.assertRaises(ValidationError):
            GitHubTranslator.to_domain(_raw_repository(discussionCategories={"nodes": nodes}))
