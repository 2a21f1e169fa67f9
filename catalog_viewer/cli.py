from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_LANG, Settings, get_settings
from .excel_writer import EXPORT_FILENAME
from .fetch import load_products
from .logging_config import setup_logging
from .messages import msg
from .state import CatalogView
from .types import LoadError, Product


APP_PATH = Path(__file__).with_name("app.py")


def export_filtered(
    out_path: str = EXPORT_FILENAME,
    text_query: str = "",
    brand: str = "",
    category: str = "",
    settings: Optional[Settings] = None,
    lang: str = "en",
) -> List[Product]:
    """Load the catalog, apply the filters and save the visible rows.

    Raises LoadError when the store cannot be read. Returns the exported products.
    """
    settings = settings or get_settings()

    print(msg(lang, "stage_load"), flush=True)
    view = CatalogView()
    # Loaded directly so the failure reaches the caller instead of the view's log.
    products = load_products(settings)
    view.load(lambda: products)
    view.set_text_query(text_query)
    view.set_brand(brand)
    view.set_category(category)
    print(msg(lang, "loaded", total=len(view.products), visible=len(view.visible)), flush=True)

    print(msg(lang, "stage_save"), flush=True)
    view.export(out_path)
    return list(view.visible)


def _build_arg_parser(lang: str = "en") -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="catalog-viewer",
        description=msg(lang, "help_desc"),
    )
    p.add_argument(
        "--lang",
        dest="lang",
        choices=["en", "ru"],
        default=lang,
        help=msg(lang, "help_lang"),
    )
    sub = p.add_subparsers(dest="command", required=True)

    export = sub.add_parser("export", help=msg(lang, "help_export"))
    export.add_argument(
        "-s",
        "--search",
        dest="text_query",
        default="",
        help=msg(lang, "help_search"),
    )
    export.add_argument(
        "-b",
        "--brand",
        dest="brand",
        default="",
        help=msg(lang, "help_brand"),
    )
    export.add_argument(
        "-c",
        "--category",
        dest="category",
        default="",
        help=msg(lang, "help_category"),
    )
    export.add_argument(
        "-o",
        "--out",
        dest="out_path",
        default=EXPORT_FILENAME,
        help=msg(lang, "help_out"),
    )

    sub.add_parser("serve", help=msg(lang, "help_serve"))
    return p


def serve() -> int:
    return subprocess.call([sys.executable, "-m", "streamlit", "run", str(APP_PATH)])


def main(argv: Optional[list[str]] = None) -> int:
    try:
        settings = get_settings()
    except ValueError as exc:
        print(msg(DEFAULT_LANG, "config_error", error=exc), file=sys.stderr)
        return 1
    parser = _build_arg_parser(settings.lang if settings.lang in ("en", "ru") else DEFAULT_LANG)
    args = parser.parse_args(argv)
    lang = args.lang
    setup_logging(settings.log_level)

    if args.command == "serve":
        return serve()

    try:
        products = export_filtered(
            out_path=args.out_path,
            text_query=args.text_query,
            brand=args.brand,
            category=args.category,
            settings=settings,
            lang=lang,
        )
        print(msg(lang, "success", count=len(products)))
        print(msg(lang, "file", path=args.out_path))
        return 0
    except KeyboardInterrupt:
        print(msg(lang, "interrupted"), file=sys.stderr)
        return 130
    except LoadError as exc:
        print(msg(lang, "load_error", error=exc.message), file=sys.stderr)
        return 1
    except Exception as exc:
        print(msg(lang, "error", error=exc), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
