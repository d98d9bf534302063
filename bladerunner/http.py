"""
HTTP Helpers
Serve rendered views from Sanic handlers
"""
import asyncio
from typing import Any, Dict, Optional

from sanic.response import HTTPResponse, html

from bladerunner.helpers import view


async def view_response(
    name: str,
    data: Optional[Dict[str, Any]] = None,
    status: int = 200,
    headers: Optional[Dict[str, str]] = None
) -> HTTPResponse:
    """
    Render a view into an HTML response

    Rendering runs in a worker thread so template evaluation and compilation
    do not block the event loop.

    Example:
        @app.get('/')
        async def home(request):
            return await view_response('pages.home', {'title': 'Home'})
    """
    instance = view(name, data)
    content = await asyncio.to_thread(instance.render)
    return html(content, status=status, headers=headers)
