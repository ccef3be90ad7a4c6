"""Tests for the console walk-through."""

import io

from todo_contracts.demo import run_demo


def test_run_demo():
    out = io.StringIO()

    store = run_demo(out)

    text = out.getvalue()
    assert "===== Unified contract =====" in text
    assert "===== Segmented contracts =====" in text
    assert "User: Taro Yamada (yamada@example.com)" in text
    assert text.count("(open)") == 2
    assert text.rstrip().endswith("(done)")
    assert store.get_todo("todo1").completed is True
