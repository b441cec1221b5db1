"""
render.py - HTML Tag Cloud Renderer

Builds the tag cloud page from a Ranking with BeautifulSoup and writes
it (and an optional JSON report) atomically: either the whole file
appears at the destination or nothing does.
"""

import os
import json
import tempfile

from bs4 import BeautifulSoup

from tagcloud.fonts import font_class_name


PAGE_SKELETON = (
    "<html><head><title></title></head>"
    "<body><h2></h2><hr/>"
    '<div class="cdiv"><p class="cbox"></p></div>'
    "</body></html>"
)


def page_title(ranking, source_name):
    return f"Top {ranking.size} words in {source_name}"


def render_page(ranking, source_name, stylesheets=()):
    """
    Render the tag cloud page.

    Args:
        ranking: Ranking with entries in display order
        source_name: Input file name shown in the title and heading
        stylesheets: hrefs linked from <head>, in order

    Returns:
        HTML markup as a string
    """
    soup = BeautifulSoup(PAGE_SKELETON, "lxml")
    title = page_title(ranking, source_name)

    soup.title.string = title
    for href in stylesheets:
        soup.head.append(soup.new_tag("link", attrs={
            "href": href, "rel": "stylesheet", "type": "text/css"}))
    soup.h2.string = title

    box = soup.find("p", class_="cbox")
    for item in ranking.cloud_items():
        span = soup.new_tag("span", attrs={
            "style": "cursor:default",
            "class": font_class_name(item.count, ranking.max_count),
            "title": f"count: {item.count}",
        })
        span.string = item.word
        box.append(span)
        box.append("\n")

    return str(soup)


def _file_mode():
    """Permission bits a plain open() would give a new file under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _stage(path, text, encoding):
    """Write text to a temp file beside path and return the temp file's path."""
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tagcloud-", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding=encoding) as f:
            f.write(text)
        # mkstemp creates 0600 files
        os.chmod(tmp_path, _file_mode())
    except BaseException:
        os.remove(tmp_path)
        raise
    return tmp_path


def write_files(files, encoding="utf-8"):
    """
    Write several (path, text) pairs so that none appears unless all were written.

    Every file is staged to a temp file first; only then are they renamed
    into place.
    """
    staged = []
    try:
        for path, text in files:
            staged.append((_stage(path, text, encoding), path))
        for tmp_path, path in staged:
            os.replace(tmp_path, path)
    except BaseException:
        for tmp_path, _ in staged:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
        raise


def write_page(path, markup, encoding="utf-8"):
    write_files([(path, markup)], encoding)


def build_report(ranking, source_name):
    """Structured summary of a ranking (see write_report)."""
    return {
        "source": source_name,
        "size": ranking.size,
        "max_count": ranking.max_count,
        "words": [
            {"word": item.word, "count": item.count, "font_class": item.font_class}
            for item in ranking.cloud_items()
        ],
    }


def render_report(ranking, source_name):
    return json.dumps(build_report(ranking, source_name), indent=2, ensure_ascii=False) + "\n"


def write_report(path, ranking, source_name, encoding="utf-8"):
    """Write the ranking as JSON next to the page."""
    write_files([(path, render_report(ranking, source_name))], encoding)
