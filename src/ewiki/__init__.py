"""ewiki - serve a directory of Markdown files as a browsable wiki."""

from ewiki.config import Config, ServerConfig, WikiConfig
from ewiki.core.providers import Computed, Literal
from ewiki.server import configure_wiki, create_app, setup_wiki

__all__ = [
    "Computed",
    "Config",
    "Literal",
    "ServerConfig",
    "WikiConfig",
    "configure_wiki",
    "create_app",
    "setup_wiki",
]
