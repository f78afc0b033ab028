"""
Pytest configuration and fixtures.
"""

import pytest

from browser_auto.config import SelectorSettings, StructureSettings
from browser_auto.dom import HTMLDocument


SUBMIT_HTML = (
    '<div id="app"><button class="btn-primary" data-testid="submit">Send</button></div>'
)

SHOP_HTML = """
<html>
<head><title>Shop</title></head>
<body>
<header id="top" class="site-header">
  <nav class="main-nav">
    <a class="nav-link" href="/">Home</a>
    <a class="nav-link" href="/cart">Cart</a>
  </nav>
</header>
<main>
  <form id="login" class="login-form">
    <input class="field-input" name="user" placeholder="User">
    <input class="field-input" name="pass" type="password" placeholder="Password">
    <button type="submit" data-testid="login-submit">Log in</button>
  </form>
  <ul class="catalog">
    <li class="item-card"><span class="cost">1</span></li>
    <li class="item-card"><span class="cost">2</span></li>
    <li class="item-card"><span class="cost">3</span></li>
  </ul>
  <div style="display:none" id="modal"><p>Hidden</p></div>
</main>
</body>
</html>
"""


@pytest.fixture
def submit_document():
    """The single-button page used throughout the selector tests."""
    return HTMLDocument.from_html(SUBMIT_HTML)


@pytest.fixture
def shop_document():
    """A small storefront page with repeated structures."""
    return HTMLDocument.from_html(SHOP_HTML)


@pytest.fixture
def selector_settings():
    """Default selector limits."""
    return SelectorSettings()


@pytest.fixture
def structure_settings():
    """Default structure budget."""
    return StructureSettings()
