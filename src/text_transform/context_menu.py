"""
Text Transform Context Menu

A small, self-contained menu of transformations for text selections. It
instantiates its own FunctionRegistry keyed by menu item id, independent
of the tool catalog:

    Text Transform                  text-transform
      📝 Naming Conventions         category-naming
        camelCase                   tool-camel-case
        ...
      ⚡ camelCase                  quick-camel-case
      ...

The caller owns persistence. push_recent() returns the updated
most-recently-used list for the caller to store.
"""

import inspect
import re
from typing import Any, Dict, List, NamedTuple, Optional, Sequence

from text_transform.functions import Direct, FunctionRegistry, Generator
from text_transform.logging_config import get_logger
from text_transform.transformations import ciphers, crypto, encoding, formatters, naming_conventions

logger = get_logger("context_menu")

ROOT_ID = "text-transform"
ROOT_TITLE = "Text Transform"
MAX_RECENT = 5


# =============================================================================
# Text utilities (menu only)
# =============================================================================

def to_upper_case(text: str) -> str:
    return text.upper()


def to_lower_case(text: str) -> str:
    return text.lower()


def to_title_case(text: str) -> str:
    """Capitalize each run of non-space characters that starts with a word character."""
    return re.sub(r"\w\S*", lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), text)


def count_characters(text: str) -> str:
    words = len(text.split())
    lines = len(text.split("\n"))
    return f"Characters: {len(text)} | Words: {words} | Lines: {lines}"


def trim_whitespace(text: str) -> str:
    return text.strip()


def remove_extra_spaces(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


# =============================================================================
# Menu definition
# =============================================================================

class MenuCategory(NamedTuple):
    id: str
    name: str
    icon: str


class MenuItem(NamedTuple):
    id: str
    name: str
    category: str


MENU_CATEGORIES = (
    MenuCategory("naming", "Naming Conventions", "📝"),
    MenuCategory("encoding", "Encoding", "🔐"),
    MenuCategory("crypto", "Crypto & Hash", "🔒"),
    MenuCategory("ciphers", "Ciphers", "🔀"),
    MenuCategory("formatters", "Formatters", "📋"),
    MenuCategory("text", "Text Utilities", "✏️"),
)

# (item, function) in menu order
_MENU_ENTRIES = (
    (MenuItem("camel-case", "camelCase", "naming"), Direct(naming_conventions.to_camel_case)),
    (MenuItem("pascal-case", "PascalCase", "naming"), Direct(naming_conventions.to_pascal_case)),
    (MenuItem("snake-case", "snake_case", "naming"), Direct(naming_conventions.to_snake_case)),
    (MenuItem("screaming-snake", "SCREAMING_SNAKE", "naming"), Direct(naming_conventions.to_screaming_snake_case)),
    (MenuItem("kebab-case", "kebab-case", "naming"), Direct(naming_conventions.to_kebab_case)),
    (MenuItem("train-case", "Train-Case", "naming"), Direct(naming_conventions.to_train_case)),
    (MenuItem("dot-case", "dot.case", "naming"), Direct(naming_conventions.to_dot_case)),
    (MenuItem("flat-case", "flatcase", "naming"), Direct(naming_conventions.to_flat_case)),
    (MenuItem("base64-encode", "Base64 Encode", "encoding"), Direct(encoding.base64_encode)),
    (MenuItem("base64-decode", "Base64 Decode", "encoding"), Direct(encoding.base64_decode)),
    (MenuItem("url-encode", "URL Encode", "encoding"), Direct(encoding.url_encode)),
    (MenuItem("url-decode", "URL Decode", "encoding"), Direct(encoding.url_decode)),
    (MenuItem("html-encode", "HTML Encode", "encoding"), Direct(encoding.html_encode)),
    (MenuItem("html-decode", "HTML Decode", "encoding"), Direct(encoding.html_decode)),
    (MenuItem("text-to-hex", "Text to Hex", "encoding"), Direct(encoding.text_to_hex)),
    (MenuItem("hex-to-text", "Hex to Text", "encoding"), Direct(encoding.hex_to_text)),
    (MenuItem("text-to-binary", "Text to Binary", "encoding"), Direct(encoding.text_to_binary)),
    (MenuItem("binary-to-text", "Binary to Text", "encoding"), Direct(encoding.binary_to_text)),
    (MenuItem("sha1", "SHA-1 Hash", "crypto"), Direct(crypto.sha1_hash)),
    (MenuItem("sha256", "SHA-256 Hash", "crypto"), Direct(crypto.sha256_hash)),
    (MenuItem("sha512", "SHA-512 Hash", "crypto"), Direct(crypto.sha512_hash)),
    (MenuItem("uuid", "Generate UUID", "crypto"), Generator(crypto.generate_uuid_v4)),
    (MenuItem("rot13", "ROT13", "ciphers"), Direct(ciphers.rot13)),
    (MenuItem("caesar", "Caesar Cipher", "ciphers"), Direct(ciphers.caesar_encode)),
    (MenuItem("atbash", "Atbash", "ciphers"), Direct(ciphers.atbash)),
    (MenuItem("reverse", "Reverse String", "ciphers"), Direct(ciphers.reverse_string)),
    (MenuItem("reverse-words", "Reverse Words", "ciphers"), Direct(ciphers.reverse_words)),
    (MenuItem("morse-encode", "Text to Morse", "ciphers"), Direct(ciphers.text_to_morse)),
    (MenuItem("morse-decode", "Morse to Text", "ciphers"), Direct(ciphers.morse_to_text)),
    (MenuItem("json-format", "Format JSON", "formatters"), Direct(formatters.format_json)),
    (MenuItem("json-minify", "Minify JSON", "formatters"), Direct(formatters.minify_json)),
    (MenuItem("uppercase", "UPPERCASE", "text"), Direct(to_upper_case)),
    (MenuItem("lowercase", "lowercase", "text"), Direct(to_lower_case)),
    (MenuItem("title-case", "Title Case", "text"), Direct(to_title_case)),
    (MenuItem("count", "Count Characters", "text"), Direct(count_characters)),
    (MenuItem("trim", "Trim Whitespace", "text"), Direct(trim_whitespace)),
    (MenuItem("remove-spaces", "Remove Extra Spaces", "text"), Direct(remove_extra_spaces)),
)

QUICK_ITEM_IDS = ("camel-case", "snake-case", "base64-encode", "rot13")


class ContextMenu:
    """Menu items plus the function registry that runs them."""

    def __init__(self, quick_ids: Sequence[str] = QUICK_ITEM_IDS):
        self.functions = FunctionRegistry()
        self._items: Dict[str, MenuItem] = {}
        for item, fn in _MENU_ENTRIES:
            self.functions.register(item.id, fn)
            self._items[item.id] = item
        self.functions.freeze()
        self.categories = MENU_CATEGORIES
        self.quick_ids = tuple(item_id for item_id in quick_ids if item_id in self._items)
        logger.debug("Context menu ready: %d items", len(self._items))

    def get_item(self, item_id: str) -> Optional[MenuItem]:
        return self._items.get(item_id)

    def items(self, category: Optional[str] = None) -> List[MenuItem]:
        """Items in menu order, optionally limited to one category."""
        return [item for item in self._items.values() if category is None or item.category == category]

    def quick_items(self) -> List[MenuItem]:
        return [self._items[item_id] for item_id in self.quick_ids]

    async def transform(self, item_id: str, text: str) -> Optional[str]:
        """Run a menu item on ``text``. Returns None for unknown item ids."""
        fn = self.functions.resolve(item_id)
        if fn is None:
            return None
        result = fn(text)
        if inspect.isawaitable(result):
            result = await result
        return result

    def menu_tree(self) -> List[Dict[str, Any]]:
        """Flat list of menu entries with parent links, in creation order."""
        tree: List[Dict[str, Any]] = [{"id": ROOT_ID, "parent_id": None, "title": ROOT_TITLE}]
        for category in self.categories:
            category_id = f"category-{category.id}"
            tree.append({"id": category_id, "parent_id": ROOT_ID, "title": f"{category.icon} {category.name}"})
            tree.extend(
                {"id": f"tool-{item.id}", "parent_id": category_id, "title": item.name}
                for item in self.items(category.id)
            )
        tree.append({"id": "separator-1", "parent_id": ROOT_ID, "type": "separator"})
        tree.extend(
            {"id": f"quick-{item.id}", "parent_id": ROOT_ID, "title": f"⚡ {item.name}"}
            for item in self.quick_items()
        )
        return tree

    @staticmethod
    def item_id_for(menu_id: str) -> Optional[str]:
        """Map a clicked menu entry id (tool-x / quick-x) to its item id."""
        for prefix in ("tool-", "quick-"):
            if menu_id.startswith(prefix):
                return menu_id[len(prefix):]
        return None

    async def handle_click(self, menu_id: str, selection: str) -> Optional[Dict[str, Any]]:
        """Run the item behind a clicked menu entry.

        Returns a ``showResult`` or ``showError`` message for the page, or
        None when the entry is not a tool (root, category, separator) or
        there is no selection.
        """
        item_id = self.item_id_for(menu_id)
        item = self._items.get(item_id) if item_id else None
        if item is None or not selection:
            return None
        try:
            result = await self.transform(item.id, selection)
        except Exception as e:
            logger.warning("Menu item %s failed: %s", item.id, e)
            return {"action": "showError", "error": str(e)}
        return {"action": "showResult", "original": selection, "result": result, "tool_name": item.name}


def push_recent(recent: Sequence[str], tool_id: str, limit: int = MAX_RECENT) -> List[str]:
    """Move ``tool_id`` to the front of ``recent``, dropping duplicates and overflow."""
    updated = [tool_id] + [item for item in recent if item != tool_id]
    return updated[:limit]
