"""Configuration file for pytest."""

import sys
from pathlib import Path

import pytest

# Add src directory to the path so tests can import modules correctly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Sample pages shaped like docs.flightsimulator.com


SEARCH_PAGE_STRUCTURAL = """
<html>
  <head><title>Search</title></head>
  <body>
    <div class="search-result">
      <a href="../Developer_Mode/Aircraft_Editor/Livery.htm">Creating A Livery</a>
    </div>
    <div class="search-result">
      <a href="../Content_Configuration/SimObjects/Aircraft_SimO/Liveries.htm">Aircraft Liveries</a>
    </div>
    <div class="search-result">
      <a href="/html/Developer_Mode/Aircraft_Editor/Livery.htm">Creating A Livery (again)</a>
    </div>
    <div class="search-result"><span>No link here</span></div>
    <p><a href="../Introduction/Livery_Primer.htm">Livery primer</a></p>
  </body>
</html>
"""

SEARCH_PAGE_ANCHORS_ONLY = """
<html>
  <body>
    <p>
      <a href="../Programming_APIs/SimVars/Aircraft_SimVars/Engine_Variables.htm">Engine Variables</a>
      <a href="Programming_APIs/SimVars/Simulation_Variables.htm">Simulation Variables</a>
      <a href="https://docs.flightsimulator.com/html/Samples/ENGINE_Sample.htm">ENGINE sample</a>
      <a href="../Programming_APIs/SimVars/Aircraft_SimVars/Engine_Variables.htm">engine variables duplicate</a>
      <a href="notes.txt">Engine notes</a>
    </p>
  </body>
</html>
"""

SEARCH_PAGE_EMPTY = """
<html>
  <body><p>Nothing matched your search.</p></body>
</html>
"""

CONTENT_PAGE = """
<html>
  <head>
    <title>Livery Creation</title>
    <style>body { color: red; }</style>
  </head>
  <body>
    <header>Flight Simulator SDK header</header>
    <nav><a href="../Introduction/Introduction.htm">Home</a></nav>
    <div class="toc"><a href="../Index.htm">Table of contents</a></div>
    <main>
      <h1>Creating a livery</h1>
      <p>A livery is a   set of textures
         applied to an aircraft.</p>
      <p>See <a href="Livery_Textures.htm">Livery textures</a> and
         <a href="../Content_Configuration/Liveries.htm">Liveries</a>.</p>
      <pre><code>[FLTSIM.0]
title = "My Livery"</code></pre>
      <code>x = 1</code>
    </main>
    <section id="overview">
      <p>Overview of the livery workflow.</p>
      <a href="Overview_Details.htm">Details</a>
    </section>
    <div class="examples"><p>First example block.</p></div>
    <div class="examples"><p>Second example block.</p></div>
    <div data-section="api-reference"><p>API reference text.</p></div>
    <footer>Copyright footer</footer>
    <script>console.log("tracking");</script>
  </body>
</html>
"""


@pytest.fixture
def structural_search_page():
    """Return a search page whose results use a result-container class."""
    return SEARCH_PAGE_STRUCTURAL


@pytest.fixture
def anchors_only_search_page():
    """Return a search page with nothing but bare links."""
    return SEARCH_PAGE_ANCHORS_ONLY


@pytest.fixture
def content_page():
    """Return a documentation page with chrome, sections and code."""
    return CONTENT_PAGE
