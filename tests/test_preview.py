import pytest

from channelsurf.preview import (
    DEFAULT_PREVIEW_CACHE_SIZE,
    PREVIEW_MIN_SCROLL_LINES,
    ContentKind,
    Preview,
    PreviewCache,
    PreviewContent,
    PreviewState,
    loading,
    timeout,
)


def test_total_lines_of_text():
    assert PreviewContent.ansi_text("a\nb\nc").total_lines() == 3


def test_trailing_newline_not_counted():
    content = PreviewContent.ansi_text("a\nb\n")
    assert content.total_lines() == PreviewContent.ansi_text("a\nb").total_lines()


def test_total_lines_non_text_is_zero():
    assert PreviewContent(ContentKind.LOADING).total_lines() == 0
    assert PreviewContent().total_lines() == 0


def test_total_lines_capped():
    content = PreviewContent.ansi_text("x\n" * 70000)
    assert content.total_lines() == 65535


def test_content_text_consistency():
    with pytest.raises(ValueError):
        PreviewContent(ContentKind.EMPTY, "text")
    with pytest.raises(ValueError):
        PreviewContent(ContentKind.ANSI_TEXT)


def test_meta_previews():
    assert loading("file").content.kind is ContentKind.LOADING
    assert timeout("file").content.kind is ContentKind.TIMEOUT
    assert loading("file").title == "file"
    assert timeout("file").total_lines == 1


def test_scroll_down_clamped_to_min_scroll_lines():
    state = PreviewState(preview=Preview(title="t", total_lines=20))
    state.scroll_down(1000)
    assert state.scroll == 20 - PREVIEW_MIN_SCROLL_LINES


def test_scroll_down_short_preview_stays_at_top():
    state = PreviewState(preview=Preview(title="t", total_lines=2))
    state.scroll_down(5)
    assert state.scroll == 0


def test_scroll_up_saturates():
    state = PreviewState(scroll=2)
    state.scroll_up(5)
    assert state.scroll == 0


def test_scroll_down_then_up_round_trip():
    state = PreviewState(preview=Preview(title="t", total_lines=50))
    state.scroll_down(4)
    state.scroll_up(4)
    assert state.scroll == 0


def test_update_only_on_new_title():
    state = PreviewState(preview=Preview(title="a"), scroll=4)
    state.update(Preview(title="a", total_lines=9), 0, 1)
    assert state.scroll == 4
    assert state.target_line is None
    new = Preview(title="b")
    state.update(new, 2, 1)
    assert state.preview == new
    assert state.scroll == 2
    assert state.target_line == 1


def test_reset():
    state = PreviewState(enabled=True, preview=Preview(title="a"), scroll=3, target_line=2)
    state.reset()
    assert state.preview == Preview()
    assert state.scroll == 0
    assert state.target_line is None
    assert state.enabled is True


def test_cache_insert_and_get():
    cache = PreviewCache()
    preview = Preview(title="a")
    cache.insert("a", preview)
    assert cache.get("a") == preview
    assert cache.get("missing") is None


def test_cache_evicts_oldest():
    cache = PreviewCache(2)
    for name in ("a", "b", "c"):
        cache.insert(name, Preview(title=name))
    assert "a" not in cache
    assert cache.get("c") == Preview(title="c")
    assert len(cache) == 2


def test_cache_update_existing_does_not_evict():
    cache = PreviewCache(2)
    cache.insert("a", Preview(title="a"))
    cache.insert("b", Preview(title="b"))
    cache.insert("a", Preview(title="a2"))
    assert cache.get("a").title == "a2"
    assert "b" in cache


def test_default_capacity():
    cache = PreviewCache()
    for i in range(DEFAULT_PREVIEW_CACHE_SIZE + 1):
        cache.insert(str(i), Preview(title=str(i)))
    assert len(cache) == DEFAULT_PREVIEW_CACHE_SIZE
    assert "0" not in cache


def test_get_or_insert_calls_factory_once():
    cache = PreviewCache()
    calls = []

    def factory():
        calls.append(1)
        return Preview(title="made")

    first = cache.get_or_insert("k", factory)
    second = cache.get_or_insert("k", factory)
    assert first == second
    assert len(calls) == 1


def test_invalid_capacity():
    with pytest.raises(ValueError):
        PreviewCache(0)