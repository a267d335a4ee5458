from typing import Optional, Union

from giscus_configurator.application.composer import compose, render_snippet
from giscus_configurator.application.debouncer import DEFAULT_DEBOUNCE_DELAY, Debouncer
from giscus_configurator.application.mapping_selector import MappingSelector
from giscus_configurator.application.repository_validator import Lookup, RepositoryValidator
from giscus_configurator.domain.models import DirectConfig, EmbedConfiguration, Error, Success
from giscus_configurator.domain.options import MappingChoice, Theme

SUCCESS_MESSAGE = "Success! This repository meets all of the above criteria."
ERROR_MESSAGE = "Cannot use giscus in this repository. Make sure all of the above criteria has been met."
HINT_MESSAGE = "A public GitHub repository. This is where the discussions will be linked to."


class Configurator:
    """
    One configuration session: repository input, category, mapping and toggles.

    Repository text goes through the debouncer, so the validator sees one
    identifier per pause in typing and issues one lookup for it.
    """

    def __init__(
        self,
        lookup: Lookup,
        debounce_delay: float = DEFAULT_DEBOUNCE_DELAY,
        direct_config: Optional[DirectConfig] = None,
    ):
        self.validator = RepositoryValidator(lookup)
        self.mapping_selector = MappingSelector()
        self.direct_config = direct_config or DirectConfig()
        self._debouncer: Debouncer[str] = Debouncer(self.validator.submit, delay=debounce_delay)
        self._repository = ""

    @property
    def repository(self) -> str:
        return self._repository

    def set_repository(self, value: str) -> None:
        self._repository = value
        self._debouncer.update(value)

    def select_category(self, category_id: str) -> None:
        self.validator.select_category(category_id)

    def set_mapping(self, choice: Union[MappingChoice, str]) -> None:
        self.mapping_selector.set_mapping(choice)

    def set_term(self, value: str) -> None:
        self.mapping_selector.set_term(value)

    def set_theme(self, theme: Union[Theme, str]) -> None:
        self.direct_config = self.direct_config.model_copy(update={"theme": Theme(theme)})

    def set_reactions_enabled(self, enabled: bool) -> None:
        self.direct_config = self.direct_config.model_copy(update={"reactions_enabled": enabled})

    @property
    def configuration(self) -> EmbedConfiguration:
        return compose(
            self._repository,
            self.validator.snapshot(),
            self.mapping_selector.mapping,
            self.mapping_selector.term,
            self.direct_config,
        )

    @property
    def snippet(self) -> str:
        return render_snippet(self.configuration)

    def status_message(self) -> str:
        state = self.validator.state
        if isinstance(state, Error):
            return ERROR_MESSAGE
        if isinstance(state, Success):
            return SUCCESS_MESSAGE
        return HINT_MESSAGE

    async def settle(self) -> None:
        """Waits until the typed identifier has settled and its lookup has resolved."""
        await self._debouncer.wait_settled()
        await self.validator.wait()

    async def aclose(self) -> None:
        self._debouncer.close()
        await self.validator.aclose()
