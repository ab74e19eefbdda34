import os
from dotenv import load_dotenv
from litestar.exceptions import ImproperlyConfiguredException
from supabase import create_client, Client
load_dotenv()

def provide_supabase_client() -> Client:
    url: str | None = os.environ.get("SUPABASE_URL")
    key: str | None = os.environ.get("SUPABASE_KEY")
    if not url or not key:
        raise ImproperlyConfiguredException(
            "SUPABASE_URL and SUPABASE_KEY must be set to store banners in Supabase"
        )
    return create_client(url, key)
