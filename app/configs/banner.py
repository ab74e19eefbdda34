import os
from dotenv import load_dotenv
from litestar.exceptions import ImproperlyConfiguredException
from domains.banner.files import FileManagerInterface, LocalFileManager
from domains.banner.languages import ConfigLanguageProvider
from domains.banner.module import BannerModuleConfig
from domains.supabase.service import provide_supabase_file_manager

load_dotenv()

UPLOAD_DIR = os.environ.get("BANNER_UPLOAD_DIR", "assets/banners")
BASE_URL = os.environ.get("BANNER_BASE_URL", "/banners")


def provide_language_provider() -> ConfigLanguageProvider | None:
    languages = os.environ.get("BANNER_LANGUAGES")
    if not languages:
        return None
    return ConfigLanguageProvider(
        languages, default_language=os.environ.get("BANNER_DEFAULT_LANGUAGE") or None
    )


def provide_file_manager() -> FileManagerInterface:
    storage = os.environ.get("BANNER_STORAGE", "local").lower()
    if storage == "supabase":
        return provide_supabase_file_manager(
            bucket_name=os.environ.get("BANNER_BUCKET", "banner")
        )
    if storage != "local":
        raise ImproperlyConfiguredException(f"Unknown banner storage {storage}")
    return LocalFileManager(upload_dir=UPLOAD_DIR, base_url=BASE_URL)


def banner_module_config() -> BannerModuleConfig:
    return BannerModuleConfig(
        language_provider=provide_language_provider(),
        file_manager=provide_file_manager(),
    )
