import pytest
import pytest_asyncio
from pathlib import Path
from typing import Callable

from aiohttp import web

from stats_report.sources.memory import KeyedMemoryNumberSource

NUMBER_LISTINGS = {
    "/numbers.txt": "1\n2\n3\n4\n5\n",
    "/mixed.txt": "7\nabc\n34\n\n2\nxyz\n",
    "/empty.txt": "",
    "/undecodable.txt": b"1\n\xff\xfe\n2\n",
}


@pytest.fixture
def write_numbers(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a number listing into a temporary file and return its path"""
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path
    return _write


@pytest.fixture
def fake_file_system() -> KeyedMemoryNumberSource:
    """In-memory file system preloaded with a few listings"""
    return KeyedMemoryNumberSource({
        "/path/to/an/empty/file": [],
        "/path/to/some/other/file": [1, 2, 3, 4, 5],
        "C:\\test-data\\third-file.txt": [7, 34, 2],
    })


@pytest_asyncio.fixture
async def number_server():
    """Serve NUMBER_LISTINGS over HTTP on a free local port, yielding the base URL"""
    async def handler(request: web.Request) -> web.Response:
        body = NUMBER_LISTINGS.get(request.path)
        if body is None:
            raise web.HTTPNotFound()
        if isinstance(body, bytes):
            return web.Response(body=body, content_type="text/plain", charset="utf-8")
        return web.Response(text=body)

    app = web.Application()
    app.router.add_get("/{name}", handler)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", 0)
    await site.start()
    host, port = runner.addresses[0][:2]
    try:
        yield f"http://{host}:{port}"
    finally:
        await runner.cleanup()
