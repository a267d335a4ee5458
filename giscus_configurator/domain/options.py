from enum import Enum
from typing import List, NamedTuple


class MappingChoice(str, Enum):
    """How the embedding page is matched to a GitHub discussion."""
    PATHNAME = "pathname"
    URL = "url"
    TITLE = "title"
    OG_TITLE = "og:title"
    SPECIFIC = "specific"
    NUMBER = "number"


# Mappings that carry a user-supplied term in the embed snippet.
TERM_MAPPINGS = frozenset({MappingChoice.SPECIFIC, MappingChoice.NUMBER})


class Theme(str, Enum):
    LIGHT = "light"
    LIGHT_HIGH_CONTRAST = "light_high_contrast"
    LIGHT_PROTANOPIA = "light_protanopia"
    DARK = "dark"
    DARK_HIGH_CONTRAST = "dark_high_contrast"
    DARK_PROTANOPIA = "dark_protanopia"
    DARK_DIMMED = "dark_dimmed"
    TRANSPARENT_DARK = "transparent_dark"
    PREFERRED_COLOR_SCHEME = "preferred_color_scheme"


class Option(NamedTuple):
    value: str
    label: str
    description: str = ""


MAPPING_OPTIONS: List[Option] = [
    Option(
        MappingChoice.PATHNAME.value,
        "Discussion title contains page pathname",
        "giscus will search for a discussion whose title contains the page's pathname URL component.",
    ),
    Option(
        MappingChoice.URL.value,
        "Discussion title contains page URL",
        "giscus will search for a discussion whose title contains the page's URL.",
    ),
    Option(
        MappingChoice.TITLE.value,
        "Discussion title contains page <title>",
        "giscus will search for a discussion whose title contains the page's <title> HTML tag.",
    ),
    Option(
        MappingChoice.OG_TITLE.value,
        "Discussion title contains page og:title",
        'giscus will search for a discussion whose title contains the page\'s <meta property="og:title"> HTML tag.',
    ),
    Option(
        MappingChoice.SPECIFIC.value,
        "Discussion title contains a specific term",
        "giscus will search for a discussion whose title contains a specific term.",
    ),
    Option(
        MappingChoice.NUMBER.value,
        "Specific discussion number",
        "giscus will load a specific discussion by number. This option does not support automatic discussion creation.",
    ),
]

THEME_OPTIONS: List[Option] = [
    Option(Theme.LIGHT.value, "GitHub Light"),
    Option(Theme.LIGHT_HIGH_CONTRAST.value, "GitHub Light High Contrast"),
    Option(Theme.LIGHT_PROTANOPIA.value, "GitHub Light Protanopia"),
    Option(Theme.DARK.value, "GitHub Dark"),
    Option(Theme.DARK_HIGH_CONTRAST.value, "GitHub Dark High Contrast"),
    Option(Theme.DARK_PROTANOPIA.value, "GitHub Dark Protanopia"),
    Option(Theme.DARK_DIMMED.value, "GitHub Dark Dimmed"),
    Option(Theme.TRANSPARENT_DARK.value, "Transparent Dark"),
    Option(Theme.PREFERRED_COLOR_SCHEME.value, "Preferred color scheme"),
]
