"""Tests for the glyph cache."""

import threading

from glyphsmith.engine.cache import GlyphCache, normalize_seed
from glyphsmith.engine.generator import generate_embeddable_for_seed
from glyphsmith.svg.serializer import DATA_URL_PREFIX


class CountingGenerator:
    def __init__(self) -> None:
        self.calls: list = []
        self._lock = threading.Lock()

    def __call__(self, seed, options):
        with self._lock:
            self.calls.append(seed)
        return generate_embeddable_for_seed(seed, options)


def test_normalize_seed():
    assert normalize_seed("Apple") == "apple"
    assert normalize_seed(7) == 7
    assert normalize_seed(7.0) == 7
    assert normalize_seed("") == "0"
    assert normalize_seed(None) == "0"


def test_second_lookup_is_served_from_cache(word_options):
    gen = CountingGenerator()
    cache = GlyphCache(word_options, generator=gen)
    first = cache.get_or_generate("Apple")
    second = cache.get_or_generate("Apple")
    assert first is second
    assert gen.calls == ["apple"]
    assert cache.hits == 1
    assert cache.misses == 1
    assert len(cache) == 1


def test_round_trip_apple_banana(word_options):
    cache = GlyphCache(word_options)
    apple = cache.get_or_generate("Apple")
    assert apple.startswith(DATA_URL_PREFIX + "%3Csvg")
    assert cache.get_or_generate("apple") == apple
    assert cache.hits == 1
    assert cache.get_or_generate("Banana") != apple
    assert "APPLE" in cache


def test_canonical_image_is_order_independent(word_options):
    a = GlyphCache(word_options)
    b = GlyphCache(word_options)
    first = a.get_or_generate("Apple")
    b.get_or_generate("apple")
    assert b.get_or_generate("Apple") == first
    assert first == generate_embeddable_for_seed("apple", word_options)


def test_numeric_seeds_share_key(word_options):
    gen = CountingGenerator()
    cache = GlyphCache(word_options, generator=gen)
    cache.get_or_generate(7)
    cache.get_or_generate(7.0)
    assert gen.calls == [7]


def test_empty_seeds_share_fallback(word_options):
    gen = CountingGenerator()
    cache = GlyphCache(word_options, generator=gen)
    url = cache.get_or_generate("")
    assert cache.get_or_generate(None) == url
    assert cache.get_or_generate("0") == url
    assert gen.calls == ["0"]


def test_batch_path_uses_cache(word_options):
    gen = CountingGenerator()
    cache = GlyphCache(word_options, generator=gen)
    first = cache.get_many(["Apple", "Banana"])
    second = cache.get_many(["apple", "Banana"])
    assert set(first) == {"Apple", "Banana"}
    assert second["apple"] == first["Apple"]
    assert second["Banana"] is first["Banana"]
    assert len(gen.calls) == 2


def test_concurrent_lookups_generate_once(word_options):
    gen = CountingGenerator()
    cache = GlyphCache(word_options, generator=gen)
    results: list[str] = []

    def worker():
        results.append(cache.get_or_generate("Shared"))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert gen.calls == ["shared"]
    assert len(set(results)) == 1
