from litestar.openapi.config import OpenAPIConfig
from litestar.openapi.plugins import SwaggerRenderPlugin

config = OpenAPIConfig(
    title="Banner admin",
    version="1.0.0",
    path="/api",
    render_plugins=[SwaggerRenderPlugin()],
)
