"""Wiki request handler.

Resolves the request path inside the wiki root and answers with a rendered
page, a streamed resource, a 404 or a 500.
"""

import asyncio
import logging
import os

from aiohttp import hdrs, web

from ewiki.app_keys import page_builder_key, pass_through_key, source_dir_key
from ewiki.core.media import (
    DEFAULT_MEDIA_TYPE,
    Classification,
    classify,
    content_disposition,
    guess_media_type,
    needs_attachment,
)
from ewiki.core.providers import to_string_safe
from ewiki.core.resolver import ResolvedTarget, resolve_target

logger = logging.getLogger(__name__)

CHUNK_SIZE = 256 * 1024


def create_wiki_routes() -> list[web.RouteDef]:
    return [web.get("/{path:.*}", handle_wiki_request)]


async def handle_wiki_request(request: web.Request) -> web.StreamResponse:
    path = request.match_info.get("path", "")

    try:
        target = await resolve_target(request.app[source_dir_key], path)
        if target is None:
            logger.debug(f"Not found: {path!r}")
            return web.Response(status=404)

        media_type = guess_media_type(target.path)
        classification = classify(media_type, request.app[pass_through_key])

        if classification is Classification.DOCUMENT:
            html = await request.app[page_builder_key].render(target)
            return web.Response(
                status=200,
                text=html,
                content_type="text/html",
                charset="utf-8",
            )

        return await stream_resource(request, target, media_type or DEFAULT_MEDIA_TYPE)
    except Exception as e:
        logger.exception(f"Failed to serve {path!r}")
        return web.Response(
            status=500,
            text=to_string_safe(e),
            content_type="text/plain",
            charset="utf-8",
        )


async def stream_resource(
    request: web.Request,
    target: ResolvedTarget,
    media_type: str,
) -> web.StreamResponse:
    """Stream a file in fixed-size chunks.

    The file is opened before any header is sent, so open failures still
    produce an error response. Once streaming has started, failures only
    end the transfer.
    """
    headers = {hdrs.CONTENT_TYPE: media_type}
    if needs_attachment(media_type):
        headers[hdrs.CONTENT_DISPOSITION] = content_disposition(target.path.name)

    fobj = await asyncio.to_thread(target.path.open, "rb")
    try:
        size = (await asyncio.to_thread(os.fstat, fobj.fileno())).st_size

        response = web.StreamResponse(status=200, headers=headers)
        response.content_length = size
        await response.prepare(request)

        try:
            while chunk := await asyncio.to_thread(fobj.read, CHUNK_SIZE):
                await response.write(chunk)
            await response.write_eof()
        except ConnectionResetError:
            logger.debug(f"Client disconnected while streaming {target.relative_path}")
        except OSError as e:
            logger.error(f"Failed to stream {target.relative_path}: {e}")

        return response
    finally:
        await asyncio.to_thread(fobj.close)
