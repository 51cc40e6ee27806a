"""Test setup for tdmscrape."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


PROJECT_HTML = """
<html>
  <body>
    <div id="content">
      <div class="sect1">
        <h2 id="_project_1">Project 1 -- Getting started</h2>
        <div class="sectionbody">
          <div class="sect2">
            <h3 id="_project_objectives">Project Objectives</h3>
            <div class="ulist">
              <ul>
                <li><p>Get familiar with the cluster.</p></li>
              </ul>
            </div>
          </div>
          <div class="sect2">
            <h3 id="_question_1">Question 1 (2 pts)</h3>
            <div class="paragraph">
              <p><strong>Load the <code>flights</code> dataset.</strong></p>
            </div>
            <div class="olist loweralpha">
              <ol class="loweralpha" type="a">
                <li>
                  <p>Read the data from <a href="/data/flights.csv">flights.csv</a>.</p>
                </li>
                <li>
                  <p>Plot the <em>average</em> delay.</p>
                  <div class="olist lowerroman">
                    <ol class="lowerroman" type="i">
                      <li><p>by month</p></li>
                      <li><p>by carrier</p></li>
                      <li><p>by <code>origin</code> airport</p></li>
                    </ol>
                  </div>
                </li>
              </ol>
            </div>
          </div>
          <div class="sect2">
            <h3 id="_question_2">Question 2 (1 pt)</h3>
            <div class="ulist">
              <ul>
                <li><p>Write a function.</p></li>
              </ul>
            </div>
          </div>
        </div>
      </div>
    </div>
  </body>
</html>
"""


@pytest.fixture
def project_html() -> str:
    """A project page with one introductory section and two questions."""
    return PROJECT_HTML
