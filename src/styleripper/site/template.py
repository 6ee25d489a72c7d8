"""Page template, client-side navigation script and route table."""

from __future__ import annotations

import json
import re

from styleripper.site.collect import strip_first_dir

HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<%head%>
</head>
<body>
<div id="root"> <%body%> </div>
<%navigation%>
</body>
</html>"""

# Swaps #root's content for the target page on link clicks and history pops.
NAVIGATION_TEMPLATE = """var root = document.querySelector('#root')
function d() {
  document.querySelectorAll('a[href]').forEach(function(e) { e.onclick = g })
}
function g(e) {
  var p = typeof e == 'object' ? e.target.getAttribute('href') : e
  root.innerHTML = r[p]
  history.pushState({}, '', p)
  d()
  return false
}
window.onpopstate = function() {
  g(location.pathname)
}
d()
<%routes%>
r[location.pathname] = root.innerHTML"""

_INDEX_RE = re.compile(r"index\.html$")


def page_route(path: str) -> str:
    """Turn a page path into the URL it is served at.

    ``pages/index.html`` -> ``/``, ``pages/about/index.html`` -> ``/about/``,
    ``pages/blog.html`` -> ``/blog.html``.
    """
    return "/" + _INDEX_RE.sub("", strip_first_dir(path))


def route_table(routes: dict[str, str], exclude: str | None = None) -> str:
    """Render *routes* as a JSON object, leaving out the *exclude* route.

    ``</`` is escaped so page markup cannot close the surrounding script.
    """
    table = {route: body for route, body in routes.items() if route != exclude}
    return json.dumps(table, ensure_ascii=False, separators=(",", ":")).replace("</", "<\\/")


def render_navigation(routes: dict[str, str], self_route: str) -> str:
    return NAVIGATION_TEMPLATE.replace(
        "<%routes%>", f"var r = {route_table(routes, exclude=self_route)}", 1
    )


def render_page(head: str, body: str, navigation: str) -> str:
    """Fill the document template; *navigation* is wrapped in a script element."""
    page = HTML_TEMPLATE.replace("<%head%>", head, 1)
    page = page.replace("<%navigation%>", f"<script>{navigation}</script>", 1)
    return page.replace("<%body%>", body, 1)
