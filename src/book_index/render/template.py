"""Fixed page template for the generated index.

The page carries its own small program: it renders the embedded records into the
table on load and filters rows in the browser. ``BOOK_INDEX_PLACEHOLDER`` is the only
substitution point for record data.
"""
from __future__ import annotations

BOOK_INDEX_PLACEHOLDER = "/*@BOOK_INDEX@*/"

STYLE = """
body { font-family: sans-serif; font-size: 12px; }
table { border: none; }
td { padding: .5em; margin: 0; vertical-align: top; }
td.title { width: 400px; }
td.sc { font-size: .8em; }
thead tr { background: black; color: white; font-weight: 700; }
tbody tr td { border-bottom: 1px solid #ccc; }
input#q { border: none; width: 80%; padding: .2em; font-size: 2em; margin: 1em 0; }
input[type="checkbox"] { display: none; }
input[type="checkbox"]:checked + label { background-color: blue; color: white; }
label { font-size: 2em; padding: .2em; border-radius: 5px; color: blue; text-decoration: underline; cursor: pointer; }

tr.hide { display: none; }
input[type="checkbox"]:checked ~ table td.misc { display: none; }
input[type="checkbox"]:checked ~ table td.title { width: 100%; }
input[type="checkbox"]:checked ~ table { width: 100%; }
"""

SCRIPT = """
let bookIndex = %s;

function escapeHtml(value) {
  return String(value == null ? '' : value)
    .replace(/&/g, '&amp;')
    .replace(/</g, '&lt;')
    .replace(/>/g, '&gt;')
    .replace(/"/g, '&quot;')
    .replace(/'/g, '&#39;');
}

function createRow(item) {
  let haystack = [item.author, item.title, item.subjectClassification, item.seriesTitle].join(' ').toLowerCase();

  return `
    <tr data-haystack="${escapeHtml(haystack)}">
      <td class="title"><a href="${escapeHtml(item.url)}">${escapeHtml(item.title)}</a></td>
      <td class="misc">${escapeHtml(item.author)}</td>
      <td class="sc misc">
        Edition: ${escapeHtml(item.edition)}<br/>
        Series Title: ${escapeHtml(item.seriesTitle)}<br/>
        Volume Number: ${escapeHtml(item.volumeNumber)}<br/>
        Subject Classification: ${escapeHtml(item.subjectClassification)}
      </td>
    </tr>
  `;
}

function fillTable(items) {
  document.querySelector('table#index > tbody').innerHTML = items.map(createRow).join('\\n');
}

function queryWords(query) {
  return query.toLowerCase().split(/\\s+/).filter(word => word.length > 0);
}

function hideIfNotRelevant(row, words) {
  let haystack = row.dataset.haystack;
  if (!words.every(word => haystack.indexOf(word) > -1)) {
    row.classList.add('hide');
  }
}

function showAll(rows) {
  rows.forEach(row => row.classList.remove('hide'));
}

function search(query, rows) {
  showAll(rows);
  let words = queryWords(query);
  if (words.length) {
    rows.forEach(row => hideIfNotRelevant(row, words));
  }
}

fillTable(bookIndex);

let searchInput = document.querySelector('input#q');
let rows = document.querySelectorAll('table#index > tbody > tr');

searchInput.addEventListener('keypress', (event) => {
  if (event.key === 'Enter' || event.keyCode == 13) {
    search(event.target.value, rows);
  }
});

searchInput.addEventListener('keyup', (event) => {
  if ((event.key === 'Backspace' || event.keyCode == 8) && event.target.value == '') {
    showAll(rows);
  }
});
""" % BOOK_INDEX_PLACEHOLDER

PAGE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>{title}</title>
    <style>{style}</style>
  </head>
  <body>
    <input id="q" type="text" onblur="this.focus()" autofocus placeholder="{placeholder}" />
    <input type="checkbox" id="toggleMisc" />
    <label for="toggleMisc">{toggle_label}</label>
    <table id="index" cellspacing="0">
      <thead>
        <tr>
          <td class="title">Title</td>
          <td class="misc">Author</td>
          <td class="misc">Misc</td>
        </tr>
      </thead>
      <tbody>
      </tbody>
    </table>
    <script>{script}</script>
  </body>
</html>
"""
