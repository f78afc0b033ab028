"""
Live capture - Snapshot a Playwright page into an HTMLDocument.

One evaluate call serializes the document element and records, for every
element in document order, its computed display/visibility, bounding box
and (for form controls) live value. Parsing the HTML back and pairing the
records by position gives the algorithms a synchronous DOM with real
layout, so no browser round trip happens per selector query.
"""

import logging
from typing import Any, TYPE_CHECKING

from browser_auto.dom.document import HTMLDocument
from browser_auto.exceptions import CaptureError

if TYPE_CHECKING:
    from playwright.async_api import Page

logger = logging.getLogger(__name__)


CAPTURE_DOCUMENT_JS = """
() => {
    const root = document.documentElement;
    const elements = [root, ...root.querySelectorAll('*')];
    const layouts = elements.map((el) => {
        const record = { tag: el.tagName.toLowerCase() };
        try {
            const style = window.getComputedStyle(el);
            const rect = el.getBoundingClientRect();
            record.display = style.display;
            record.visibility = style.visibility;
            record.x = rect.left;
            record.y = rect.top;
            record.width = rect.width;
            record.height = rect.height;
        } catch (e) {
            record.display = 'none';
        }
        if (/^(input|textarea|select)$/.test(record.tag) && typeof el.value === 'string') {
            record.value = el.value;
        }
        return record;
    });
    return {
        html: root.outerHTML,
        viewportHeight: window.innerHeight,
        layouts: layouts,
    };
}
"""


async def capture_document(page: "Page") -> HTMLDocument:
    """
    Capture the current state of a page.
    
    Args:
        page: Playwright page (anything with an async evaluate())
        
    Returns:
        Document with layouts attached
        
    Raises:
        CaptureError: If the capture script fails or returns garbage
    """
    url = getattr(page, "url", None)
    try:
        payload: Any = await page.evaluate(CAPTURE_DOCUMENT_JS)
    except Exception as e:
        raise CaptureError(f"Failed to capture page: {e}", url=url) from e
    
    if not isinstance(payload, dict) or not isinstance(payload.get("html"), str):
        raise CaptureError("Capture script returned no document", url=url)
    
    layouts = payload.get("layouts") or []
    document = HTMLDocument.from_html(
        payload["html"],
        viewport_height=payload.get("viewportHeight"),
    )
    attached = document.attach_layouts(layouts)
    logger.debug(f"Captured {len(layouts)} layout records, attached {attached}")
    if attached < len(layouts):
        logger.warning(
            f"Only {attached} of {len(layouts)} elements have layout; "
            "the rest use static visibility"
        )
    return document
