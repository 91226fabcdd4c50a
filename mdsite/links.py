from __future__ import annotations

import xml.etree.ElementTree as etree

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

INDEX_PAGE = "index.md"


def strip_root_marker(url: str, root_marker: str) -> str:
    # Segment aware: "/content" must not match "/contentious".
    if not root_marker:
        return url
    prefix = f"/{root_marker}"
    if url == prefix:
        return "/"
    if url.startswith(prefix + "/"):
        return url[len(prefix) :]
    return url


def rewrite_link(url: str, root_marker: str) -> str:
    """Map a link into the content tree onto the generated site.

    ``/<root_marker>/docs/page.md`` becomes ``/docs/page.html`` and index
    pages collapse onto their directory. Anything not ending in ``.md`` is
    returned untouched.
    """
    url = strip_root_marker(url, root_marker)
    if not url.endswith(".md"):
        return url
    if url.endswith("./" + INDEX_PAGE):
        return "/"
    if url.endswith(INDEX_PAGE):
        return url[: -len(INDEX_PAGE)]
    return url[: -len(".md")] + ".html"


class LinkRewriterProcessor(Treeprocessor):
    def __init__(self, md, root_marker: str):
        super().__init__(md)
        self.root_marker = root_marker

    def run(self, root: etree.Element) -> None:
        for el in root.iter("a"):
            href = el.get("href")
            if href is None:
                continue
            el.set("href", rewrite_link(href, self.root_marker))


class LinkRewriterExtension(Extension):
    def __init__(self, root_marker: str, **kwargs):
        super().__init__(**kwargs)
        self.root_marker = root_marker

    def extendMarkdown(self, md):
        # After "inline" (20) so that links produced by inline patterns exist.
        md.treeprocessors.register(
            LinkRewriterProcessor(md, self.root_marker),
            "link_rewriter",
            15,
        )
