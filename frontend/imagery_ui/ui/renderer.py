"""Pure projection of a ``SubmissionState`` onto a display tree."""

from typing import List, Optional

from imagery_ui.models.result import EncodedImage, ProcessingResult, Product
from imagery_ui.models.state import SubmissionState
from imagery_ui.ui.images import decode_image
from imagery_ui.ui.tree import Node, h

TITLE = "AI Product Imagery"
SUBTITLE = "YouTube → products → segmentation → enhanced shots"
URL_PLACEHOLDER = "Paste a YouTube URL (review, unboxing, demo)…"
SAVE_LABEL = "Save artifacts on backend disk (out/...)"
TIP = "Tip: It may take 20–90s depending on the video and API speed."
PROCESSING = "Processing…"
NO_PRODUCTS = "No products found."
NO_IMAGE = "No image"
INVALID_IMAGE = "Invalid image"
MASK_NOTE = "Mask also available (not shown)"
FOOTER = "Frontend: FastAPI (server-rendered) • Backend: FastAPI + LangGraph + Gemini"
RESULT_JSON_ID = "result-json"


def render_page(state: SubmissionState) -> Node:
    return h(
        "div",
        {"class": "page"},
        h(
            "header",
            {"class": "container header"},
            h("h1", None, TITLE),
            h("div", {"class": "small"}, SUBTITLE),
        ),
        h(
            "main",
            {"class": "container"},
            render_form(state),
            render_error(state.error_message),
            render_processing(state.in_flight),
            render_result(state.result),
        ),
        h("footer", {"class": "footer"}, FOOTER),
    )


def render_form(state: SubmissionState) -> Node:
    return h(
        "form",
        {"class": "card form", "method": "post", "action": "/submit"},
        h(
            "div",
            {"class": "row"},
            h(
                "input",
                {
                    "class": "input",
                    "name": "youtube_url",
                    "placeholder": URL_PLACEHOLDER,
                    "value": state.input_url,
                },
            ),
            h(
                "button",
                {"class": "btn", "type": "submit", "disabled": state.in_flight},
                PROCESSING if state.in_flight else "Process",
            ),
        ),
        h(
            "div",
            {"class": "options"},
            h("input", {"id": "save", "name": "save", "type": "checkbox", "value": "true", "checked": state.persist_to_disk}),
            h("label", {"for": "save", "class": "small"}, SAVE_LABEL),
        ),
        h("div", {"class": "small tip"}, TIP),
    )


def render_error(error_message: Optional[str]) -> Optional[Node]:
    if error_message is None:
        return None
    return h("div", {"class": "error"}, error_message)


def render_processing(in_flight: bool) -> Optional[Node]:
    if not in_flight:
        return None
    return h(
        "div",
        {"class": "card processing"},
        h("div", {"class": "ping"}),
        h("div", None, PROCESSING),
    )


def render_result(result: Optional[ProcessingResult]) -> Optional[Node]:
    if result is None:
        return None

    products = result.product_list
    if products:
        body: List[Node] = [render_product(idx, product) for idx, product in enumerate(products, start=1)]
    else:
        body = [h("div", {"class": "small no-products"}, NO_PRODUCTS)]

    return h(
        "div",
        {"class": "card result"},
        h(
            "div",
            {"class": "row"},
            h(
                "div",
                None,
                h("div", {"class": "small"}, "Video:"),
                h("a", {"class": "source", "href": result.source_url, "target": "_blank", "rel": "noreferrer"}, result.source_url),
                h("div", {"class": "small save-dir"}, f"Saved to: {result.save_directory}") if result.save_directory else None,
            ),
            h(
                "div",
                None,
                h("button", {"class": "btn secondary copy", "type": "button", "data-copy-target": RESULT_JSON_ID}, "Copy JSON"),
                h("json-data", {"id": RESULT_JSON_ID, "payload": result.to_wire()}),
            ),
        ),
        h("div", {"class": "products"}, body),
    )


def render_product(index: int, product: Product) -> Node:
    score = product.confidence_score
    segmentation = product.segmentation
    cropped = segmentation.cropped_image if segmentation else None
    has_mask = bool(segmentation and segmentation.mask_image)

    return h(
        "div",
        {"class": "card product"},
        h(
            "div",
            {"class": "row"},
            h("h3", None, f"{index}. {product.name or 'Product'}"),
            h("span", {"class": "badge"}, f"conf: {score:.2f}") if score is not None else None,
        ),
        h("div", {"class": "small rationale"}, product.rationale) if product.rationale else None,
        h(
            "div",
            {"class": "row row-3"},
            h(
                "div",
                {"class": "best-frame"},
                h("div", {"class": "label"}, "Best frame"),
                h("div", {"class": "asq"}, render_image(product.best_frame_image, "Best frame")),
            ),
            h(
                "div",
                {"class": "segmented"},
                h("div", {"class": "label"}, "Segmented product"),
                h("div", {"class": "asq"}, render_image(cropped, "Cropped product")),
                h("div", {"class": "small mask-note"}, MASK_NOTE) if has_mask else None,
            ),
            h(
                "div",
                {"class": "enhanced"},
                h("div", {"class": "label"}, "Enhanced shots"),
                h(
                    "div",
                    {"class": "row enhanced-grid"},
                    [
                        h("div", {"class": "asq"}, render_image(image, f"Enhanced {i}"))
                        for i, image in enumerate(product.enhanced_images, start=1)
                    ],
                ),
            ),
        ),
    )


def render_image(image: Optional[EncodedImage], alt: str) -> Node:
    try:
        decoded = decode_image(image)
    except ValueError:
        return h("div", {"class": "small placeholder invalid"}, INVALID_IMAGE)
    if decoded is None:
        return h("div", {"class": "small placeholder"}, NO_IMAGE)
    return h("img", {"src": decoded.src, "alt": alt, "width": decoded.width, "height": decoded.height})
