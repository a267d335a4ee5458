from html import escape
from typing import List, Tuple

from giscus_configurator.domain.models import DirectConfig, EmbedConfiguration, ValidatorSnapshot
from giscus_configurator.domain.options import MappingChoice, TERM_MAPPINGS

CLIENT_SCRIPT_URL = "https://giscus.app/client.js"

REPO_PLACEHOLDER = "[ENTER REPO HERE]"
REPO_ID_PLACEHOLDER = "[ENTER REPO ID HERE]"
CATEGORY_ID_PLACEHOLDER = "[ENTER CATEGORY ID HERE]"
TERM_PLACEHOLDER = "[ENTER TERM HERE]"

# Continuation lines line up under "src" in "<script src=".
ATTRIBUTE_INDENT = " " * 8

CSS_SNIPPET = """.giscus, .giscus-frame {
  width: 100%;
}

.giscus-frame {
  border: none;
}"""


def compose(
    repository: str,
    validator: ValidatorSnapshot,
    mapping: MappingChoice,
    term: str,
    direct_config: DirectConfig,
) -> EmbedConfiguration:
    """
    Builds the embed configuration from the current inputs.

    Pure and deterministic, so it can run on every state change. The term is
    dropped for mappings that do not use one, and a category id that is not
    among the current categories is treated as unselected.
    """
    mapping = MappingChoice(mapping)
    known_ids = {category.id for category in validator.categories}
    return EmbedConfiguration(
        repository=repository,
        repository_id=validator.repository_id,
        category_id=validator.category_id if validator.category_id in known_ids else "",
        mapping=mapping,
        term=term if mapping in TERM_MAPPINGS else "",
        theme=direct_config.theme,
        reactions_enabled=direct_config.reactions_enabled,
    )


def embed_attributes(configuration: EmbedConfiguration) -> List[Tuple[str, str]]:
    """
    Returns the snippet's valued attributes in their fixed order.
    Unresolved fields are replaced by placeholder tokens, never left empty.
    """
    attributes = [
        ("src", CLIENT_SCRIPT_URL),
        ("data-repo", configuration.repository or REPO_PLACEHOLDER),
        ("data-repo-id", configuration.repository_id or REPO_ID_PLACEHOLDER),
        ("data-category-id", configuration.category_id or CATEGORY_ID_PLACEHOLDER),
        ("data-mapping", configuration.mapping.value),
    ]
    if configuration.mapping in TERM_MAPPINGS:
        attributes.append(("data-term", configuration.term or TERM_PLACEHOLDER))
    attributes += [
        ("data-reactions-enabled", "1" if configuration.reactions_enabled else "0"),
        ("data-theme", configuration.theme.value),
        ("crossorigin", "anonymous"),
    ]
    return attributes


def render_snippet(configuration: EmbedConfiguration) -> str:
    """Renders the <script> tag users paste into their page template."""
    lines = [f'{name}="{escape(value, quote=True)}"' for name, value in embed_attributes(configuration)]
    lines.append("async>")
    body = f"\n{ATTRIBUTE_INDENT}".join(lines)
    return f"<script {body}\n</script>"


def render_css_snippet() -> str:
    return CSS_SNIPPET
