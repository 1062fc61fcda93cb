from pathlib import Path

import pytest
from jinja2 import UndefinedError

from hiccup.builder import h
from hiccup.templating import jinja_env, render_page


def _write_template(tmp_path: Path, name: str, text: str) -> Path:
    templates_dir = tmp_path / "templates"
    templates_dir.mkdir(exist_ok=True)
    (templates_dir / name).write_text(text, encoding="utf-8")
    return templates_dir


def test_render_page_inserts_markup_unescaped(tmp_path: Path):
    templates_dir = _write_template(
        tmp_path, "page.html", "<title>{{ title }}</title>{{ content }}"
    )
    env = jinja_env(templates_dir)

    html = render_page(env, "page.html", h.p(class_='"lead"')["a & b"], title="<T>")

    assert html == '<title>&lt;T&gt;</title><p class="lead">a & b</p>'


def test_hiccup_filter(tmp_path: Path):
    templates_dir = _write_template(tmp_path, "frag.html", "{{ node | hiccup }}")
    env = jinja_env(templates_dir)

    assert env.get_template("frag.html").render(node=h.br) == "<br/>"


def test_strict_undefined(tmp_path: Path):
    templates_dir = _write_template(tmp_path, "strict.html", "{{ missing_value }}{{ content }}")
    env = jinja_env(templates_dir)

    with pytest.raises(UndefinedError):
        render_page(env, "strict.html", h.br)
