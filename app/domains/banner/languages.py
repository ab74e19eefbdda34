from abc import ABC, abstractmethod
from typing import Iterable


class LanguageProviderInterface(ABC):
    @abstractmethod
    def get_languages(self) -> list[str]:
        """Return the language codes a banner must be translated into."""

    @abstractmethod
    def get_default_language(self) -> str:
        pass


class ConfigLanguageProvider(LanguageProviderInterface):
    """Language provider backed by a static list, e.g. ``BANNER_LANGUAGES=en,fr``."""

    def __init__(
        self, languages: Iterable[str] | str, default_language: str | None = None
    ):
        if isinstance(languages, str):
            languages = languages.split(",")
        codes: list[str] = []
        for code in languages:
            code = code.strip()
            if code and code not in codes:
                codes.append(code)
        if not codes:
            raise ValueError("At least one language code is required")
        if default_language and default_language not in codes:
            raise ValueError(f"Default language {default_language} is not configured")
        self.languages = codes
        self.default_language = default_language or codes[0]

    def get_languages(self) -> list[str]:
        return list(self.languages)

    def get_default_language(self) -> str:
        return self.default_language
