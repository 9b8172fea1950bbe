import asyncio

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from unicode_gacha.config import GachaConfig
from unicode_gacha.data import ResourceLoadError, create_text_source, source_from_config
from unicode_gacha.data.http_source import HttpTextSource
from unicode_gacha.data.local_source import LocalTextSource
from unicode_gacha.unicode import init_unicode_index

from .conftest import BLOCKS, CJK_READINGS, UNICODE_DATA


def test_local_source_reads_file(source):
    text = asyncio.run(source.read_text("Blocks.txt"))
    assert "Basic Latin" in text


def test_local_source_missing_file(tmp_path):
    source = LocalTextSource(tmp_path)
    with pytest.raises(ResourceLoadError) as exc_info:
        asyncio.run(source.read_text("UnicodeData.txt"))
    assert exc_info.value.name == "UnicodeData.txt"
    assert isinstance(exc_info.value.__cause__, OSError)


def _static_app() -> web.Application:
    files = {
        "UnicodeData.txt": UNICODE_DATA,
        "Blocks.txt": BLOCKS,
        "Unihan/Unihan_Readings.txt": CJK_READINGS,
    }

    async def handler(request: web.Request) -> web.Response:
        name = request.match_info["name"]
        if name not in files:
            raise web.HTTPNotFound()
        return web.Response(text=files[name], charset="utf-8")

    app = web.Application()
    app.router.add_get("/data/{name:.+}", handler)
    return app


def test_http_source_reads_text():
    async def scenario():
        async with TestServer(_static_app()) as server:
            source = HttpTextSource(str(server.make_url("/data/")))
            return await source.read_text("Blocks.txt")

    assert asyncio.run(scenario()) == BLOCKS


def test_http_source_not_found():
    async def scenario():
        async with TestServer(_static_app()) as server:
            source = HttpTextSource(str(server.make_url("/data")))
            await source.read_text("Missing.txt")

    with pytest.raises(ResourceLoadError) as exc_info:
        asyncio.run(scenario())
    assert exc_info.value.reason == "HTTP 404"


def test_index_from_http_source():
    async def scenario():
        async with TestServer(_static_app()) as server:
            source = HttpTextSource(str(server.make_url("/data")))
            return await init_unicode_index(source, config=GachaConfig())

    index = asyncio.run(scenario())
    assert index.get_card_data(0x4E01).description.endswith("Mandarin: dīng")


def test_http_url_join():
    source = HttpTextSource("http://example.com/data/")
    assert source.url_for("Blocks.txt") == "http://example.com/data/Blocks.txt"
    assert source.url_for("/Unihan/Unihan_Readings.txt") == "http://example.com/data/Unihan/Unihan_Readings.txt"


def test_create_text_source(tmp_path):
    local = create_text_source("local", tmp_path)
    assert isinstance(local, LocalTextSource)
    assert local.root == tmp_path

    remote = create_text_source("http", base_url="http://example.com/data", timeout=5)
    assert isinstance(remote, HttpTextSource)
    assert remote.timeout == 5


def test_create_text_source_rejects_unknown():
    with pytest.raises(ValueError):
        create_text_source("ftp")
    with pytest.raises(ValueError):
        create_text_source("http")


def test_source_from_config(tmp_path):
    source = source_from_config(GachaConfig(data_path=tmp_path))
    assert isinstance(source, LocalTextSource)
    assert source.root == tmp_path

    source = source_from_config(GachaConfig(source_type="http", base_url="http://example.com/d"))
    assert source.source_type == "http"


def test_local_source_invalid_utf8(tmp_path):
    (tmp_path / "Blocks.txt").write_bytes(b"0000..007F; Basic \xff Latin\n")
    with pytest.raises(ResourceLoadError) as exc_info:
        asyncio.run(LocalTextSource(tmp_path).read_text("Blocks.txt"))
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_http_source_invalid_utf8():
    async def handler(request: web.Request) -> web.Response:
        return web.Response(body=b"0000..007F; Basic \xff Latin\n", content_type="text/plain")

    async def scenario():
        app = web.Application()
        app.router.add_get("/data/Blocks.txt", handler)
        async with TestServer(app) as server:
            source = HttpTextSource(str(server.make_url("/data")))
            await source.read_text("Blocks.txt")

    with pytest.raises(ResourceLoadError) as exc_info:
        asyncio.run(scenario())
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_invalid_utf8_fails_index_initialization(source, data_dir):
    (data_dir / "Blocks.txt").write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(ResourceLoadError):
        asyncio.run(init_unicode_index(source, config=GachaConfig()))
