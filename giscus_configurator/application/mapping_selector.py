import logging
from typing import Union

from giscus_configurator.domain.exceptions import InvalidMappingException
from giscus_configurator.domain.options import MappingChoice, TERM_MAPPINGS

logger = logging.getLogger(__name__)


class MappingSelector:
    """
    Holds the page <-> discussion mapping and its optional term.

    The term only exists for the specific and number mappings. Choosing a
    mapping always clears it, even when the same mapping is chosen again.
    """

    def __init__(self, mapping: Union[MappingChoice, str] = MappingChoice.PATHNAME):
        self._mapping = self._coerce(mapping)
        self._term = ""

    @staticmethod
    def _coerce(choice: Union[MappingChoice, str]) -> MappingChoice:
        try:
            return MappingChoice(choice)
        except ValueError:
            raise InvalidMappingException(f"Unknown mapping: {choice!r}") from None

    @property
    def mapping(self) -> MappingChoice:
        return self._mapping

    @property
    def term(self) -> str:
        return self._term

    @property
    def requires_term(self) -> bool:
        return self._mapping in TERM_MAPPINGS

    def set_mapping(self, choice: Union[MappingChoice, str]) -> None:
        self._mapping = self._coerce(choice)
        self._term = ""

    def set_term(self, value: str) -> None:
        if not self.requires_term:
            logger.debug(f"Ignoring term {value!r}: mapping {self._mapping.value} takes no term.")
            return
        self._term = value
