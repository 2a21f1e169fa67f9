from __future__ import annotations


MESSAGES = {
    "en": {
        "title": "Product Dashboard",
        "search_placeholder": "Search by name, brand, category",
        "search_label": "Search",
        "brand_label": "Brand",
        "category_label": "Category",
        "all_brands": "All Brands",
        "all_categories": "All Categories",
        "reset": "Reset Filters",
        "export": "Export to Excel ({count} items)",
        "download": "Download {filename}",
        "export_failed": "Export failed: {error}",
        "showing": "Showing {visible} of {total} products",
        "no_matches": "No products match your current filters.",
        "loading": "Loading products...",
        "card_brand": "Brand",
        "card_category": "Category",
        "price": "${price:.2f}",
        "stage_load": "[1/2] Loading products…",
        "stage_save": "[2/2] Saving to Excel…",
        "loaded": "Loaded products: {total}. Matching filters: {visible}",
        "success": "Export complete. Saved products: {count}",
        "file": "File: {path}",
        "load_error": "Could not load products: {error}",
        "config_error": "Configuration error: {error}",
        "error": "Export error: {error}",
        "interrupted": "Interrupted by user",
        "help_desc": "Browse the product catalog or export a filtered selection to Excel.",
        "help_export": "Load products, apply filters and save them to a spreadsheet",
        "help_serve": "Start the browser dashboard",
        "help_search": "Free-text search over name, brand and category",
        "help_brand": "Exact brand to keep",
        "help_category": "Exact category to keep",
        "help_out": "Path to Excel output (default Filtered_Products.xlsx)",
        "help_lang": "Messages language: en or ru (default en)",
    },
    "ru": {
        "title": "Каталог товаров",
        "search_placeholder": "Поиск по названию, бренду, категории",
        "search_label": "Поиск",
        "brand_label": "Бренд",
        "category_label": "Категория",
        "all_brands": "Все бренды",
        "all_categories": "Все категории",
        "reset": "Сбросить фильтры",
        "export": "Экспорт в Excel ({count} шт.)",
        "download": "Скачать {filename}",
        "export_failed": "Не удалось выполнить экспорт: {error}",
        "showing": "Показано {visible} из {total} товаров",
        "no_matches": "Нет товаров, подходящих под фильтры.",
        "loading": "Загрузка товаров...",
        "card_brand": "Бренд",
        "card_category": "Категория",
        "price": "{price:.2f} ₽",
        "stage_load": "[1/2] Загрузка товаров…",
        "stage_save": "[2/2] Сохранение в Excel…",
        "loaded": "Загружено товаров: {total}. Подходит под фильтры: {visible}",
        "success": "Экспорт завершён. Сохранено товаров: {count}",
        "file": "Файл: {path}",
        "load_error": "Не удалось загрузить товары: {error}",
        "config_error": "Ошибка конфигурации: {error}",
        "error": "Ошибка экспорта: {error}",
        "interrupted": "Прервано пользователем",
        "help_desc": "Просмотр каталога товаров или экспорт отфильтрованной выборки в Excel.",
        "help_export": "Загрузить товары, применить фильтры и сохранить в таблицу",
        "help_serve": "Запустить веб-интерфейс",
        "help_search": "Поиск по названию, бренду и категории",
        "help_brand": "Оставить только этот бренд",
        "help_category": "Оставить только эту категорию",
        "help_out": "Путь для сохранения Excel (по умолчанию Filtered_Products.xlsx)",
        "help_lang": "Язык сообщений: en или ru (по умолчанию en)",
    },
}


def msg(lang: str, key: str, **kwargs) -> str:
    lang_key = lang if lang in MESSAGES else "en"
    template = MESSAGES[lang_key].get(key, "")
    return template.format(**kwargs)
