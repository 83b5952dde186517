"""Application keys for type-safe app configuration access."""

from pathlib import Path

from aiohttp import web

from ewiki.core.page import PageBuilder

source_dir_key = web.AppKey("source_dir", Path)
page_builder_key = web.AppKey("page_builder", PageBuilder)
pass_through_key = web.AppKey("pass_through", tuple[str, ...])
