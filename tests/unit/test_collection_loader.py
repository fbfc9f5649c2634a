"""Test collection loader service."""

import asyncio

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from movie_browser.config import CollectionConfig, Config, SourceConfig
from movie_browser.core.models import MovieCollection
from movie_browser.core.services import CollectionLoader, RecordParser
from movie_browser.core.services.collection_loader import is_url


def make_loader(*sources, **collection_options) -> CollectionLoader:
    """Build a loader for (location, tag) pairs."""
    config = Config(
        collection=CollectionConfig(
            sources=[SourceConfig(location=str(location), tag=tag) for location, tag in sources],
            **collection_options,
        )
    )
    return CollectionLoader(config, RecordParser())


@pytest.mark.asyncio
async def test_load_local_sources(sample_sources):
    """Test that records of every source are merged in declared order."""
    loader = make_loader(
        (sample_sources["Olivier"], "Olivier"), (sample_sources["Loïc"], "Loïc")
    )

    collection = await loader.load()

    assert isinstance(collection, MovieCollection)
    assert collection.ready
    assert [record.title for record in collection.records] == [
        "Matrix",
        "Amélie",
        "La Haine",
        "Parasite",
    ]
    assert [record.source for record in collection.records] == [
        "Olivier",
        "Olivier",
        "Loïc",
        "Loïc",
    ]
    assert collection.source_counts == {"Olivier": 2, "Loïc": 2}
    assert collection.failed_sources == []


@pytest.mark.asyncio
async def test_load_extracts_genres(sample_sources):
    """Test that the genre facet is computed over the merged records."""
    loader = make_loader(
        (sample_sources["Olivier"], "Olivier"), (sample_sources["Loïc"], "Loïc")
    )

    collection = await loader.load()

    assert collection.genres == (
        "Action",
        "Comédie",
        "Crime",
        "Drame",
        "Romance",
        "Science Fiction",
        "Thriller",
    )


@pytest.mark.asyncio
async def test_load_with_missing_source(sample_sources, tmp_path):
    """Test that an unavailable source contributes nothing."""
    loader = make_loader(
        (tmp_path / "missing.csv", "Olivier"), (sample_sources["Loïc"], "Loïc")
    )

    collection = await loader.load()

    assert collection.ready
    assert [record.title for record in collection.records] == ["La Haine", "Parasite"]
    assert collection.failed_sources == ["Olivier"]
    assert collection.sources[0].error == "file not found"


@pytest.mark.asyncio
async def test_load_with_all_sources_missing(tmp_path):
    """Test that a total failure still produces a ready, empty collection."""
    loader = make_loader((tmp_path / "a.csv", "Olivier"), (tmp_path / "b.csv", "Loïc"))

    collection = await loader.load()

    assert collection.ready
    assert len(collection) == 0
    assert collection.genres == ()
    assert collection.failed_sources == ["Olivier", "Loïc"]


@pytest.mark.asyncio
async def test_load_empty_source(tmp_path, sample_sources):
    """Test that an empty document is a successful source with no records."""
    empty = tmp_path / "empty.csv"
    empty.write_text("", encoding="utf-8")
    loader = make_loader((empty, "Olivier"), (sample_sources["Loïc"], "Loïc"))

    collection = await loader.load()

    assert collection.sources[0].available
    assert collection.source_counts == {"Olivier": 0, "Loïc": 2}


@pytest.mark.asyncio
async def test_load_keeps_declared_order(sample_sources):
    """Test that the merge order follows the configuration, not completion order."""

    class SlowFirstLoader(CollectionLoader):
        async def fetch_text(self, location, tag):
            if tag == "Olivier":
                await asyncio.sleep(0.05)
            return await super().fetch_text(location, tag)

    config = Config(
        collection=CollectionConfig(
            sources=[
                SourceConfig(location=str(sample_sources["Olivier"]), tag="Olivier"),
                SourceConfig(location=str(sample_sources["Loïc"]), tag="Loïc"),
            ]
        )
    )
    loader = SlowFirstLoader(config, RecordParser())

    collection = await loader.load()

    assert [record.source for record in collection.records] == [
        "Olivier",
        "Olivier",
        "Loïc",
        "Loïc",
    ]


@pytest.mark.asyncio
async def test_load_maps_unexpected_errors(sample_sources):
    """Test that an unexpected error is reported against its source only."""

    class BrokenLoader(CollectionLoader):
        async def load_source(self, location, tag):
            if tag == "Olivier":
                raise RuntimeError("boom")
            return await super().load_source(location, tag)

    config = Config(
        collection=CollectionConfig(
            sources=[
                SourceConfig(location=str(sample_sources["Olivier"]), tag="Olivier"),
                SourceConfig(location=str(sample_sources["Loïc"]), tag="Loïc"),
            ]
        )
    )
    loader = BrokenLoader(config, RecordParser())

    collection = await loader.load()

    assert collection.failed_sources == ["Olivier"]
    assert collection.sources[0].error == "boom"
    assert collection.source_counts["Loïc"] == 2


@pytest.mark.asyncio
async def test_load_resolves_relative_paths(sample_sources):
    """Test that relative locations use the configured base path."""
    base = sample_sources["Olivier"].parent.parent
    loader = make_loader(("public/movies-olivier.csv", "Olivier"), base_path=str(base))

    collection = await loader.load()

    assert collection.source_counts == {"Olivier": 2}
    assert collection.sources[0].location == str(sample_sources["Olivier"])


@pytest.mark.asyncio
async def test_load_over_http(olivier_csv, loic_csv):
    """Test loading sources served over HTTP."""

    async def olivier(request):
        return web.Response(text=olivier_csv, content_type="text/csv")

    async def loic(request):
        return web.Response(text=loic_csv, content_type="text/csv")

    app = web.Application()
    app.router.add_get("/movies-olivier.csv", olivier)
    app.router.add_get("/movies-loic.csv", loic)

    server = TestServer(app)
    await server.start_server()
    try:
        async with make_loader(
            (server.make_url("/movies-olivier.csv"), "Olivier"),
            (server.make_url("/movies-loic.csv"), "Loïc"),
            timeout=5,
        ) as loader:
            collection = await loader.load()
    finally:
        await server.close()

    assert [record.title for record in collection.records] == [
        "Matrix",
        "Amélie",
        "La Haine",
        "Parasite",
    ]
    assert collection.failed_sources == []


@pytest.mark.asyncio
async def test_load_http_error_status(loic_csv):
    """Test that an HTTP error status marks the source unavailable."""

    async def loic(request):
        return web.Response(text=loic_csv, content_type="text/csv")

    app = web.Application()
    app.router.add_get("/movies-loic.csv", loic)

    server = TestServer(app)
    await server.start_server()
    try:
        async with make_loader(
            (server.make_url("/movies-olivier.csv"), "Olivier"),
            (server.make_url("/movies-loic.csv"), "Loïc"),
        ) as loader:
            collection = await loader.load()
    finally:
        await server.close()

    assert collection.failed_sources == ["Olivier"]
    assert collection.sources[0].error == "HTTP 404"
    assert collection.source_counts["Loïc"] == 2


@pytest.mark.asyncio
async def test_close_releases_session(sample_sources):
    """Test that closing the loader is safe without an open session."""
    loader = make_loader((sample_sources["Olivier"], "Olivier"))

    await loader.load()
    await loader.close()
    await loader.close()


def test_is_url():
    """Test URL detection."""
    assert is_url("http://example.org/movies.csv")
    assert is_url("HTTPS://example.org/movies.csv")
    assert not is_url("public/movies-olivier.csv")
    assert not is_url("/tmp/movies.csv")


@pytest.mark.asyncio
async def test_load_file_with_invalid_bytes(tmp_path):
    """Test that undecodable bytes are replaced instead of dropping the source."""
    latin1 = tmp_path / "latin1.csv"
    latin1.write_bytes(b"Title\nAlien\nAm\xe9lie\n")
    loader = make_loader((latin1, "Olivier"))

    collection = await loader.load()

    assert collection.failed_sources == []
    assert [record.title for record in collection.records] == ["Alien", "Am\ufffdlie"]


@pytest.mark.asyncio
async def test_load_http_with_invalid_bytes():
    """Test that undecodable bytes over HTTP are replaced."""

    async def latin1(request):
        return web.Response(
            body=b"Title\nAlien\nAm\xe9lie\n",
            headers={"Content-Type": "text/csv; charset=utf-8"},
        )

    app = web.Application()
    app.router.add_get("/movies.csv", latin1)

    server = TestServer(app)
    await server.start_server()
    try:
        async with make_loader((server.make_url("/movies.csv"), "Olivier")) as loader:
            collection = await loader.load()
    finally:
        await server.close()

    assert collection.failed_sources == []
    assert [record.title for record in collection.records] == ["Alien", "Am\ufffdlie"]
