"""aiohttp application setup for ewiki.

The wiki is a sub-application that a host aiohttp application mounts under
its root prefix. create_app() builds such a host for standalone mode.
"""

import logging

from aiohttp import web

from ewiki.api.wiki import create_wiki_routes
from ewiki.app_keys import page_builder_key, pass_through_key, source_dir_key
from ewiki.assets import STATIC_DIRS, get_resource_dir, get_templates_dir
from ewiki.config import Config, WikiConfig
from ewiki.core.page import PageBuilder

logger = logging.getLogger(__name__)


def configure_wiki(app: web.Application, config: WikiConfig) -> None:
    """Register wiki settings and routes on an application.

    Args:
        app: Application that serves the wiki at its own root
        config: Wiki configuration
    """
    source_dir = config.resolved_source_dir()
    root = config.normalized_root()
    asset_prefix = "" if root == "/" else root

    app[source_dir_key] = source_dir
    app[pass_through_key] = tuple(config.pass_through)
    app[page_builder_key] = PageBuilder(
        source_dir,
        get_templates_dir(),
        title=config.title,
        base_path=config.normalized_base_path(),
        asset_prefix=asset_prefix,
        sub_title=config.sub_title,
        fav_icon=config.fav_icon,
        logo=config.logo,
        css=config.css,
        js=config.js,
    )

    # Bundled assets must be registered before the catch-all wiki route
    for name in STATIC_DIRS:
        static_dir = get_resource_dir(name)
        if static_dir.is_dir():
            app.router.add_static(f"/{name}", static_dir)

    app.router.add_routes(create_wiki_routes())


def setup_wiki(config: WikiConfig, app: web.Application | None = None) -> web.Application:
    """Create the wiki application and optionally mount it.

    Args:
        config: Wiki configuration
        app: Host application to mount the wiki on, at config.root

    Returns:
        The application serving the wiki. For a root of "/" this is the host
        application itself, since aiohttp cannot mount sub-applications there.
    """
    root = config.normalized_root()

    if app is not None and root == "/":
        configure_wiki(app, config)
        logger.info(f"Serving wiki from {config.resolved_source_dir()} at /")
        return app

    wiki = web.Application()
    configure_wiki(wiki, config)

    if app is not None:
        app.add_subapp(root, wiki)
        logger.info(f"Serving wiki from {wiki[source_dir_key]} at {root}/")

    return wiki


def create_app(config: Config) -> web.Application:
    """Create standalone aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()
    setup_wiki(config.wiki, app)

    root = config.wiki.normalized_root()
    if root != "/":

        async def redirect_to_wiki(request: web.Request) -> web.Response:
            raise web.HTTPFound(f"{root}/")

        app.router.add_get("/", redirect_to_wiki)

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
