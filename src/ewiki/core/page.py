"""Wiki page rendering.

Wraps the raw Markdown of a document in the bundled header/footer templates.
The Markdown itself is embedded as a JSON string and rendered in the browser.
"""

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ewiki.core.breadcrumbs import build_breadcrumbs
from ewiki.core.providers import (
    Computed,
    Provider,
    as_provider,
    default_sub_title,
    resolve_text,
)
from ewiki.core.resolver import ResolvedTarget

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "e-wiki"
SUB_TITLE_SEPARATOR = " :: "


@dataclass(frozen=True)
class PageContext:
    """Per-request display settings of a wiki page."""

    title: str
    sub_title: str
    logo: str
    fav_icon: str
    custom_css: str
    custom_js: str
    asset_prefix: str

    def to_template_data(self) -> dict[str, str]:
        """Variables available to the header and footer templates."""
        return {
            "fav_icon": self.fav_icon,
            "page_logo": self.logo,
            "page_title": self.title,
            "page_sub_title": self.sub_title,
            "asset_prefix": self.asset_prefix,
        }


def read_document(path: Path) -> str:
    """Read the Markdown source of a document.

    Invalid UTF-8 sequences are replaced with U+FFFD.
    """
    return path.read_text(encoding="utf-8", errors="replace")


class PageBuilder:
    """Builds the HTML page for a Markdown document.

    Providers are resolved for every request, so computed values may depend
    on the file being rendered.
    """

    def __init__(
        self,
        source_dir: Path,
        templates_dir: Path,
        *,
        title: str = DEFAULT_TITLE,
        base_path: str = "/",
        asset_prefix: str = "",
        sub_title: Any = None,
        fav_icon: Any = None,
        logo: Any = None,
        css: Any = None,
        js: Any = None,
    ) -> None:
        """Initialize page builder.

        Args:
            source_dir: Canonical wiki root
            templates_dir: Directory containing header.html, content.html and footer.html
            title: Page title, "e-wiki" when empty
            base_path: Link prefix for breadcrumbs
            asset_prefix: URL prefix of the bundled static assets
            sub_title: Subtitle value or function of the file path
            fav_icon: Favicon URL or function of the file path
            logo: Logo URL or function of the file path
            css: Custom stylesheet URL or function of the file path
            js: Custom script URL or function of the file path
        """
        self._source_dir = source_dir
        self._title = title.strip() or DEFAULT_TITLE
        self._base_path = base_path
        self._asset_prefix = asset_prefix

        self._sub_title: Provider | None = as_provider(sub_title) or Computed(
            lambda file: default_sub_title(source_dir, file),
        )
        self._fav_icon = as_provider(fav_icon, f"{asset_prefix}/img/favicon.svg")
        self._logo = as_provider(logo, f"{asset_prefix}/img/logo.svg")
        self._css = as_provider(css)
        self._js = as_provider(js)

        self._env = Environment(
            loader=FileSystemLoader(str(templates_dir)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            enable_async=True,
        )

    @property
    def source_dir(self) -> Path:
        """Wiki root."""
        return self._source_dir

    @property
    def base_path(self) -> str:
        """Link prefix for breadcrumbs."""
        return self._base_path

    async def build_context(self, file_path: Path) -> PageContext:
        """Resolve all providers for a file."""
        sub_title = await resolve_text(self._sub_title, file_path)
        if sub_title:
            sub_title = SUB_TITLE_SEPARATOR + sub_title

        return PageContext(
            title=self._title,
            sub_title=sub_title,
            logo=await resolve_text(self._logo, file_path),
            fav_icon=await resolve_text(self._fav_icon, file_path),
            custom_css=await resolve_text(self._css, file_path),
            custom_js=await resolve_text(self._js, file_path),
            asset_prefix=self._asset_prefix,
        )

    async def render(self, target: ResolvedTarget) -> str:
        """Render the HTML page for a document.

        Raises:
            OSError: If the document cannot be read
            jinja2.TemplateError: If a template fails to render
        """
        context = await self.build_context(target.path)
        data = context.to_template_data()

        header = await self._env.get_template("header.html").render_async(data)
        footer = await self._env.get_template("footer.html").render_async(data)

        markdown = await asyncio.to_thread(read_document, target.path)
        body = await self._env.get_template("content.html").render_async(
            markdown=markdown,
            breadcrumbs=build_breadcrumbs(self._base_path, target.relative_path),
            custom_css=context.custom_css,
            custom_js=context.custom_js,
        )

        logger.debug(f"Rendered {target.relative_path} ({len(markdown)} characters)")
        return header + body + footer
