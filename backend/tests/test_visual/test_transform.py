"""Tests for subject-word → glyph replacement."""

import re

import pytest

from glyphsmith.engine.cache import GlyphCache
from glyphsmith.visual.transform import VisualTransformer
from glyphsmith.visual.vocabulary import GlyphVocabulary

_SRC = re.compile(r'<img src="([^"]+)" alt="([^"]*)"')


def _failing_generator(seed, options):
    raise RuntimeError("boom")


def test_visual_mode_off_returns_text(puzzle_html):
    vt = VisualTransformer()
    assert vt.transform(puzzle_html, visual_mode=False) == puzzle_html
    assert vt.transform(["a", "b"], visual_mode=False) == "a b"
    assert vt.transform(None, visual_mode=True) == ""
    assert len(vt.cache) == 0


def test_subjects_become_images(puzzle_html):
    vt = VisualTransformer()
    out = vt.transform(puzzle_html, visual_mode=True)
    imgs = _SRC.findall(out)
    assert [alt for _, alt in imgs] == ["Apple", "Banana"]
    assert all(src.startswith("data:image/svg+xml;utf8,%3Csvg") for src, _ in imgs)
    assert imgs[0][0] != imgs[1][0]
    # Non-subject markup is untouched.
    assert out.startswith("All ")
    assert '<span class="is-negated">not</span>' in out
    assert 'class="glyph-symbol"' in out


def test_list_input_is_joined(puzzle_html):
    vt = VisualTransformer()
    out = vt.transform([puzzle_html, '<span class="subject">Cherry</span>'], visual_mode=True)
    assert len(_SRC.findall(out)) == 3


def test_word_glyphs_are_case_insensitive():
    vt = VisualTransformer()
    a = vt.transform('<span class="subject">Apple</span>', visual_mode=True)
    b = vt.transform('<span class="subject">apple</span>', visual_mode=True)
    assert _SRC.findall(a)[0][0] == _SRC.findall(b)[0][0]
    assert vt.cache.misses == 1


def test_failed_glyph_leaves_word_as_text():
    vt = VisualTransformer(cache=GlyphCache(generator=_failing_generator))
    html = '<span class="subject">Apple</span> and more'
    assert vt.transform(html, visual_mode=True) == html


def test_empty_subject_left_alone():
    vt = VisualTransformer()
    html = '<span class="subject">  </span>'
    assert vt.transform(html, visual_mode=True) == html


def test_inner_markup_is_reduced_to_text():
    vt = VisualTransformer()
    out = vt.transform('<span class="subject"><b>Fig</b></span>', visual_mode=True)
    assert _SRC.findall(out)[0][1] == "Fig"


def test_vocabulary_is_consulted_first(word_options):
    vocab = GlyphVocabulary.build(["Apple", "banana"], word_options)
    assert set(vocab) == {"apple", "banana"}
    cache = GlyphCache(word_options)
    vt = VisualTransformer(cache=cache, vocabulary=vocab)
    out = vt.transform('<span class="subject">Apple</span>', visual_mode=True)
    assert _SRC.findall(out)[0][0] == vocab["apple"]
    assert len(cache) == 0
    # Vocabulary and cache agree on the canonical glyph.
    assert cache.get_or_generate("Apple") == vocab["apple"]


def test_vocabulary_is_read_only(word_options):
    vocab = GlyphVocabulary.build(["apple"], word_options)
    assert vocab.lookup("APPLE ") == vocab["apple"]
    assert vocab.lookup("pear") is None
    with pytest.raises(TypeError):
        vocab._entries["pear"] = "x"  # type: ignore[index]


def test_injected_cache_and_vocabulary_are_used_even_when_empty():
    cache = GlyphCache({"size": 64, "complexity": 9})
    vocab = GlyphVocabulary()
    vt = VisualTransformer(cache=cache, vocabulary=vocab)
    assert vt.cache is cache
    assert vt.vocabulary is vocab
    vt.transform('<span class="subject">Apple</span>', visual_mode=True)
    assert cache.misses == 1
    assert "apple" in cache
