from dataclasses import dataclass, field
from typing import Any, Optional
from litestar import Router
from litestar.config.app import AppConfig
from litestar.di import Provide
from litestar.exceptions import ImproperlyConfiguredException
from domains.banner.controller import BannerAdminController
from domains.banner.files import FileManagerInterface
from domains.banner.languages import LanguageProviderInterface
from domains.banner.service import BannerService, banner_service_provider


@dataclass
class BannerModuleConfig:
    language_provider: Optional[LanguageProviderInterface] = None
    file_manager: Optional[FileManagerInterface] = None
    service_class: type[BannerService] = BannerService
    path: str = "/admin/banners"
    guards: list[Any] = field(default_factory=list)


class BannerModule:
    """Registers the banner dependencies and admin routes on a Litestar app.

    Pass ``BannerModule(config).on_app_init`` to ``Litestar(on_app_init=[...])``.
    """

    def __init__(self, config: BannerModuleConfig):
        self.config = config

    def on_app_init(self, app_config: AppConfig) -> AppConfig:
        if self.config.language_provider is None:
            raise ImproperlyConfiguredException("You should configure language provider")
        if self.config.file_manager is None:
            raise ImproperlyConfiguredException("You should configure file manager")
        app_config.dependencies.update(self._dependencies())
        app_config.route_handlers.append(
            Router(
                path=self.config.path,
                route_handlers=[BannerAdminController],
                guards=self.config.guards,
            )
        )
        return app_config

    def _dependencies(self) -> dict[str, Provide]:
        language_provider = self.config.language_provider
        file_manager = self.config.file_manager

        def provide_language_provider() -> LanguageProviderInterface:
            return language_provider

        def provide_file_manager() -> FileManagerInterface:
            return file_manager

        return {
            "language_provider": Provide(
                provide_language_provider, use_cache=True, sync_to_thread=False
            ),
            "file_manager": Provide(
                provide_file_manager, use_cache=True, sync_to_thread=False
            ),
            "banner_service": Provide(
                banner_service_provider(self.config.service_class)
            ),
        }
