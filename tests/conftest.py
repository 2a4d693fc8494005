"""
Shared fixtures: sample pages and an in-process HTTP server
"""

import asyncio
import logging

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

SIMPLE_PAGE = (
    "<html><body>"
    "<h2>History</h2><p>Founded founded</p><h2>Corporate affairs</h2>"
    "</body></html>"
)

# Latin-1 bytes served without a charset; 0xe9 is not valid UTF-8
LATIN1_PAGE = "<h2>History</h2><p>Caf\u00e9 founded founded</p><h2>Corporate affairs</h2>".encode('latin-1')

# Shaped like a wiki article: whitespace text nodes between siblings,
# headline spans inside the headings, content after the closing heading.
ARTICLE_PAGE = """<html>
<head><title>Example Corp</title></head>
<body>
<div id="content">
<p>Example Corp is a company. The company makes things.</p>
<h2><span class="mw-headline">History</span></h2>
<p>The company was founded in 1975 by two founders.</p>
<p>In 1980, the company signed a deal; the deal was large.</p>
<!-- editor note: company company company -->
<ul>
<li>Early growth</li>
<li>Later growth</li>
</ul>
<p>   </p>
<h2><span class="mw-headline">Corporate affairs</span></h2>
<p>The board meets. The company reports.</p>
</div>
</body>
</html>
"""


@pytest.fixture
def restore_logging():
    """Undo handler and level changes made by LogManager"""
    root_logger = logging.getLogger()
    perf_logger = logging.getLogger('performance')
    saved = (list(root_logger.handlers), root_logger.level,
             list(perf_logger.handlers), perf_logger.level, perf_logger.propagate)
    yield
    for handler in root_logger.handlers:
        if handler not in saved[0]:
            handler.close()
    for handler in perf_logger.handlers:
        if handler not in saved[2]:
            handler.close()
    root_logger.handlers[:] = saved[0]
    root_logger.setLevel(saved[1])
    perf_logger.handlers[:] = saved[2]
    perf_logger.setLevel(saved[3])
    perf_logger.propagate = saved[4]


def build_app() -> web.Application:
    async def article(request):
        return web.Response(text=ARTICLE_PAGE, content_type='text/html')

    async def simple(request):
        return web.Response(text=SIMPLE_PAGE, content_type='text/html')

    async def latin1(request):
        return web.Response(body=LATIN1_PAGE, content_type='text/html')

    async def missing(request):
        return web.Response(status=404, text=SIMPLE_PAGE, content_type='text/html')

    async def broken(request):
        return web.Response(status=503, text='unavailable')

    async def slow(request):
        await asyncio.sleep(1)
        return web.Response(text=SIMPLE_PAGE, content_type='text/html')

    async def user_agent(request):
        return web.Response(text=request.headers.get('User-Agent', ''))

    app = web.Application()
    app.router.add_get('/wiki/Article', article)
    app.router.add_get('/wiki/Simple', simple)
    app.router.add_get('/wiki/Latin1', latin1)
    app.router.add_get('/wiki/Missing', missing)
    app.router.add_get('/wiki/Broken', broken)
    app.router.add_get('/wiki/Slow', slow)
    app.router.add_get('/user-agent', user_agent)
    return app


@pytest_asyncio.fixture
async def page_server():
    server = TestServer(build_app())
    await server.start_server()
    yield server
    await server.close()
