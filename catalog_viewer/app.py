"""
Product catalog dashboard - Streamlit application

Run with: streamlit run catalog_viewer/app.py
"""

import streamlit as st

from catalog_viewer.config import DEFAULT_LANG, Settings, get_settings
from catalog_viewer.excel_writer import EXPORT_FILENAME, XLSX_MIME
from catalog_viewer.fetch import load_products
from catalog_viewer.logging_config import get_logger, setup_logging
from catalog_viewer.messages import msg
from catalog_viewer.state import STATUS_LOADING, STATUS_NO_MATCHES, CatalogView

VIEW_KEY = "catalog_view"
LOAD_ATTEMPTED_KEY = "catalog_load_attempted"
SEARCH_KEY = "filter_search"
BRAND_KEY = "filter_brand"
CATEGORY_KEY = "filter_category"
EXPORT_KEY = "export_result"
RESET_BUTTON_KEY = "reset_filters"
EXPORT_BUTTON_KEY = "export_products"
DOWNLOAD_BUTTON_KEY = "download_products"

CARDS_PER_ROW = 4

logger = get_logger("app")


def get_view(settings: Settings) -> CatalogView:
    """Return the session's view, loading products on first access."""
    if VIEW_KEY not in st.session_state:
        st.session_state[VIEW_KEY] = CatalogView()
    view = st.session_state[VIEW_KEY]

    if not st.session_state.get(LOAD_ATTEMPTED_KEY):
        # One attempt per session, success or not.
        st.session_state[LOAD_ATTEMPTED_KEY] = True
        view.load(lambda: load_products(settings))
    return view


def _reset_filters() -> None:
    st.session_state[VIEW_KEY].reset()
    st.session_state[SEARCH_KEY] = ""
    st.session_state[BRAND_KEY] = ""
    st.session_state[CATEGORY_KEY] = ""


def render_filters(view: CatalogView, lang: str) -> None:
    col1, col2, col3 = st.columns(3)

    with col1:
        search = st.text_input(
            msg(lang, "search_label"),
            key=SEARCH_KEY,
            placeholder=msg(lang, "search_placeholder"),
            label_visibility="collapsed",
        )
    with col2:
        brand = st.selectbox(
            msg(lang, "brand_label"),
            options=[""] + list(view.brands),
            key=BRAND_KEY,
            format_func=lambda b: b or msg(lang, "all_brands"),
            label_visibility="collapsed",
        )
    with col3:
        category = st.selectbox(
            msg(lang, "category_label"),
            options=[""] + list(view.categories),
            key=CATEGORY_KEY,
            format_func=lambda c: c or msg(lang, "all_categories"),
            label_visibility="collapsed",
        )

    view.set_text_query(search)
    view.set_brand(brand)
    view.set_category(category)

    btn1, btn2, btn3 = st.columns([1, 1, 4])
    with btn1:
        st.button(msg(lang, "reset"), key=RESET_BUTTON_KEY, on_click=_reset_filters)
    with btn2:
        st.button(
            msg(lang, "export", count=len(view.visible)),
            key=EXPORT_BUTTON_KEY,
            on_click=_prepare_export,
        )
    with btn3:
        render_export_result(view, lang)


def _prepare_export() -> None:
    """Build the spreadsheet for the rows on screen when export is clicked."""
    view = st.session_state[VIEW_KEY]
    result = {"visible": view.visible, "data": None, "error": None}
    try:
        result["data"] = view.export_buffer().getvalue()
    except Exception as exc:
        # Only this export fails; the rest of the page keeps rendering.
        logger.exception("Export of %d products failed", len(view.visible))
        result["error"] = str(exc)
    st.session_state[EXPORT_KEY] = result


def render_export_result(view: CatalogView, lang: str) -> None:
    result = st.session_state.get(EXPORT_KEY)
    # A prepared file is offered only while it still matches the rows on screen.
    if not result or result["visible"] != view.visible:
        return
    if result["error"] is not None:
        st.error(msg(lang, "export_failed", error=result["error"]))
        return
    st.download_button(
        label=msg(lang, "download", filename=EXPORT_FILENAME),
        data=result["data"],
        file_name=EXPORT_FILENAME,
        mime=XLSX_MIME,
        key=DOWNLOAD_BUTTON_KEY,
    )


def render_products(view: CatalogView, lang: str) -> None:
    st.caption(msg(lang, "showing", visible=len(view.visible), total=len(view.products)))

    if view.status == STATUS_LOADING:
        st.info(msg(lang, "loading"))
        return
    if view.status == STATUS_NO_MATCHES:
        st.info(msg(lang, "no_matches"))
        return

    visible = view.visible
    for start in range(0, len(visible), CARDS_PER_ROW):
        columns = st.columns(CARDS_PER_ROW)
        for column, product in zip(columns, visible[start:start + CARDS_PER_ROW]):
            with column.container(border=True):
                st.markdown(f"**{product.name}**")
                st.write(f"{msg(lang, 'card_brand')}: {product.brand}")
                st.write(f"{msg(lang, 'card_category')}: {product.category}")
                st.markdown(f"**{msg(lang, 'price', price=product.price)}**")


def main():
    try:
        settings = get_settings()
    except ValueError as exc:
        st.error(msg(DEFAULT_LANG, "config_error", error=exc))
        return
    setup_logging(settings.log_level)
    lang = settings.lang

    st.set_page_config(page_title=msg(lang, "title"), page_icon="🛒", layout="wide")
    st.title(f"🛒 {msg(lang, 'title')}")

    view = get_view(settings)
    render_filters(view, lang)
    render_products(view, lang)


if __name__ == "__main__":
    main()
