"""
HTML widget that renders ``search_catalog`` results.

The markup is served verbatim as an MCP resource. The host injects the
tool's structured output as ``window.openai.toolOutput`` and the inline
script turns ``items`` into one card per record.
"""

from typing import Any, Dict

WIDGET_URI = "ui://widget/catalog-list.html"
WIDGET_NAME = "catalog-widget"
WIDGET_TITLE = "Catalog List Widget"
WIDGET_DESCRIPTION = "Iframe UI that renders the results from search_catalog"
WIDGET_MIME_TYPE = "text/html"

WIDGET_META: Dict[str, Any] = {
    "openai/widgetPrefersBorder": True,
    "openai/widgetDescription": "Displays catalog search results as simple cards.",
}

WIDGET_HTML = """
<div id="catalog-root" style="font-family:system-ui;padding:12px;">
  <h3 style="margin:0 0 8px 0;">Catalog results</h3>
  <div id="catalog-items"></div>
  <script type="module">
    const root = document.getElementById('catalog-items');
    const payload = (window.openai && window.openai.toolOutput) || {};
    const items = (payload && payload.items) || [];

    if (!Array.isArray(items) || items.length === 0) {
      root.innerHTML = '<em>No items found.</em>';
    } else {
      for (const item of items) {
        const card = document.createElement('div');
        card.style.border = '1px solid #e5e7eb';
        card.style.borderRadius = '8px';
        card.style.padding = '8px 12px';
        card.style.margin = '8px 0';

        const title = document.createElement('div');
        title.style.fontWeight = '600';
        title.textContent = item.title || item.name || '(untitled)';

        const subtitle = document.createElement('div');
        subtitle.style.fontSize = '12px';
        subtitle.style.opacity = '0.8';
        subtitle.textContent = item.category ? String(item.category) : '';

        const desc = document.createElement('div');
        desc.style.marginTop = '4px';
        desc.textContent = item.description || '';

        card.appendChild(title);
        if (subtitle.textContent) card.appendChild(subtitle);
        if (desc.textContent) card.appendChild(desc);
        root.appendChild(card);
      }
    }
  </script>
</div>
""".strip()
