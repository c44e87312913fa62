"""
Shared HTML builders. Markup mirrors LeekDuck event pages:

<div class="page-content">
  <h2 id="raids">Raids</h2>
  <h3>Five-Star Raids: Tuesday, November 11</h3>
  <div class="pkmn-list-flex">
    <div class="pkmn-list-item">
      <div class="pkmn-list-img"><img src="..."></div>
      <div class="pkmn-name">Kyurem</div>
      <img class="shiny-icon" src="...">
    </div>
  </div>
</div>
"""

import pytest

from common.utils import soup_html
from raids.nodes import content_root

BASE_URL = "https://leekduck.com/events/test-event/"


def _boss(name, img=None, shiny=False, with_name=True, with_img=True):
    img = img or f"/assets/img/pokemon_icons/{name.lower().replace(' ', '_')}.png"
    parts = []
    if with_img:
        parts.append(f'<div class="pkmn-list-img"><img src="{img}"></div>')
    if with_name:
        parts.append(f'<div class="pkmn-name">{name}</div>')
    if shiny:
        parts.append('<img class="shiny-icon" src="/assets/img/icons/shiny-icon.png">')
    return f'<div class="pkmn-list-item">{"".join(parts)}</div>'


def _roster(*items):
    body = "".join(i if i.startswith("<") else _boss(i) for i in items)
    return f'<div class="pkmn-list-flex">{body}</div>'


def _page(body):
    return content_root(soup_html(f'<html><body><div class="page-content">{body}</div></body></html>'))


@pytest.fixture
def boss():
    return _boss


@pytest.fixture
def roster():
    return _roster


@pytest.fixture
def page():
    return _page


@pytest.fixture
def base_url():
    return BASE_URL
