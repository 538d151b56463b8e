"""
Text Transform Function Registry

Maps transform function names (the strings stored in ``Tool.transform_fn``)
to callables with one uniform contract:

    fn(input: str, options: Optional[Mapping[str, Any]] = None) -> str | Awaitable[str]

Native functions have many shapes. A small adapter class per shape reads
the options mapping, applies defaults, and calls the native function:

    Direct(fn)                 fn(input)
    WithOptions(fn, *specs)    fn(input, **options read through specs)
    WithKey(fn)                fn(input, options["key"] or "")
    Generator(fn, *specs)      fn(**options read through specs), input ignored
    Serialized(fn)             json.dumps(fn(input), indent=2) for non-str results

Adapters never await. Wrapping an ``async def`` yields a coroutine that the
caller awaits (see ``text_transform.runner``).
"""

import inspect
import json
from typing import Any, Callable, Dict, Iterator, List, Mapping, NamedTuple, Optional, Tuple

from text_transform.exceptions import DuplicateFunctionError, RegistryFrozenError
from text_transform.logging_config import get_logger
from text_transform.transformations import (
    ciphers,
    colors,
    converters,
    crypto,
    encoding,
    formatters,
    generators,
    naming_conventions,
)

logger = get_logger("functions")

TransformFunction = Callable[..., Any]
Options = Optional[Mapping[str, Any]]

NUMBER = (int, float)
TEXT = (str,)
FLAG = (bool,)


class OptionSpec(NamedTuple):
    """How an adapter reads one option.

    Attributes:
        key: Key in the options mapping
        default: Used when the key is absent or has the wrong type
        types: Accepted value types
        param: Keyword argument name of the native function (defaults to key)
    """

    key: str
    default: Any
    types: Tuple[type, ...] = TEXT
    param: Optional[str] = None

    def read(self, options: Options) -> Any:
        if not options or self.key not in options:
            return self.default
        value = options[self.key]
        # bool is a subclass of int; flags are never numbers
        if isinstance(value, bool) and bool not in self.types:
            return self.default
        if not isinstance(value, self.types):
            return self.default
        if isinstance(self.default, int) and not isinstance(self.default, bool) and isinstance(value, float):
            return int(value)
        return value

    @property
    def keyword(self) -> str:
        return self.param or self.key


class Adapter:
    """Base class: wraps a native function behind the uniform contract."""

    def __init__(self, fn: Callable[..., Any]):
        self.fn = fn
        self.__doc__ = fn.__doc__

    @property
    def is_async(self) -> bool:
        return inspect.iscoroutinefunction(self.fn)

    def __call__(self, text: str, options: Options = None) -> Any:
        raise NotImplementedError

    def __repr__(self) -> str:
        name = getattr(self.fn, "__qualname__", None) or repr(self.fn)
        return f"{type(self).__name__}({name})"


class Direct(Adapter):
    """Native signature is already ``fn(input)``."""

    def __call__(self, text: str, options: Options = None) -> Any:
        return self.fn(text)


class WithOptions(Adapter):
    """Reads declared options and passes them as keyword arguments."""

    def __init__(self, fn: Callable[..., Any], *specs: OptionSpec):
        super().__init__(fn)
        self.specs = specs

    def read_options(self, options: Options) -> Dict[str, Any]:
        return {spec.keyword: spec.read(options) for spec in self.specs}

    def __call__(self, text: str, options: Options = None) -> Any:
        return self.fn(text, **self.read_options(options))


class WithKey(Adapter):
    """Passes a secret or cipher key as the second positional argument.

    A missing or non-string key is passed as "" so the native function can
    report it in its own words.
    """

    def __init__(self, fn: Callable[..., Any], key: str = "key"):
        super().__init__(fn)
        self.key = key

    def __call__(self, text: str, options: Options = None) -> Any:
        value = (options or {}).get(self.key)
        return self.fn(text, value if isinstance(value, str) else "")


class Generator(WithOptions):
    """Produces output from options alone; the input text is ignored."""

    def __call__(self, text: str = "", options: Options = None) -> Any:
        return self.fn(**self.read_options(options))


class Serialized(Adapter):
    """Renders structured results as pretty-printed JSON."""

    def __call__(self, text: str, options: Options = None) -> Any:
        result = self.fn(text)
        if isinstance(result, str):
            return result
        return json.dumps(result, indent=2, ensure_ascii=False)


class FunctionRegistry:
    """Name -> TransformFunction map, populated once then frozen."""

    def __init__(self):
        self._functions: Dict[str, TransformFunction] = {}
        self._frozen = False

    def register(self, name: str, fn: TransformFunction) -> TransformFunction:
        """Register ``fn`` under ``name``.

        Raises:
            RegistryFrozenError: If called after freeze()
            DuplicateFunctionError: If the name is already taken
        """
        if self._frozen:
            raise RegistryFrozenError(name)
        if name in self._functions:
            raise DuplicateFunctionError(name)
        self._functions[name] = fn
        return fn

    def register_all(self, functions: Mapping[str, TransformFunction]) -> None:
        for name, fn in functions.items():
            self.register(name, fn)

    def freeze(self) -> "FunctionRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def resolve(self, name: str) -> Optional[TransformFunction]:
        """Return the function registered under ``name``, or None."""
        return self._functions.get(name)

    def has(self, name: str) -> bool:
        return name in self._functions

    def names(self) -> List[str]:
        """Registered names in registration order."""
        return list(self._functions)

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def __len__(self) -> int:
        return len(self._functions)

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)


NAMING_FUNCTIONS: Dict[str, TransformFunction] = {
    "toCamelCase": Direct(naming_conventions.to_camel_case),
    "toPascalCase": Direct(naming_conventions.to_pascal_case),
    "toSnakeCase": Direct(naming_conventions.to_snake_case),
    "toScreamingSnakeCase": Direct(naming_conventions.to_screaming_snake_case),
    "toKebabCase": Direct(naming_conventions.to_kebab_case),
    "toTrainCase": Direct(naming_conventions.to_train_case),
    "toDotCase": Direct(naming_conventions.to_dot_case),
    "toPathCase": Direct(naming_conventions.to_path_case),
    "toNamespaceCase": Direct(naming_conventions.to_namespace_case),
    "toAdaCase": Direct(naming_conventions.to_ada_case),
    "toCobolCase": Direct(naming_conventions.to_cobol_case),
    "toFlatCase": Direct(naming_conventions.to_flat_case),
    "toUpperFlatCase": Direct(naming_conventions.to_upper_flat_case),
    "detectNamingConvention": Direct(naming_conventions.detect_naming_convention),
    "convertNamingConvention": WithOptions(
        naming_conventions.convert_naming_convention,
        OptionSpec("target", "camelCase"),
    ),
}

ENCODING_FUNCTIONS: Dict[str, TransformFunction] = {
    "base64Encode": Direct(encoding.base64_encode),
    "base64Decode": Direct(encoding.base64_decode),
    "base32Encode": Direct(encoding.base32_encode),
    "base32Decode": Direct(encoding.base32_decode),
    "urlEncode": Direct(encoding.url_encode),
    "urlDecode": Direct(encoding.url_decode),
    "htmlEncode": Direct(encoding.html_encode),
    "htmlDecode": Direct(encoding.html_decode),
    "textToBinary": Direct(encoding.text_to_binary),
    "binaryToText": Direct(encoding.binary_to_text),
    "textToHex": Direct(encoding.text_to_hex),
    "hexToText": Direct(encoding.hex_to_text),
    "utf8Encode": Direct(encoding.utf8_encode),
    "utf8Decode": Direct(encoding.utf8_decode),
    "textToAscii": Direct(encoding.text_to_ascii),
    "asciiToText": Direct(encoding.ascii_to_text),
}

CRYPTO_FUNCTIONS: Dict[str, TransformFunction] = {
    "md5Hash": Direct(crypto.md5_hash),
    "sha1Hash": Direct(crypto.sha1_hash),
    "sha256Hash": Direct(crypto.sha256_hash),
    "sha512Hash": Direct(crypto.sha512_hash),
    "generateUUIDv4": Generator(crypto.generate_uuid_v4),
    "generateULID": Generator(crypto.generate_ulid),
    "generateNanoID": Generator(crypto.generate_nano_id, OptionSpec("size", 21, NUMBER)),
    "decodeJWT": Direct(crypto.decode_jwt),
    "generateHMACSHA256": WithKey(crypto.generate_hmac_sha256),
    "generateBcryptHash": Direct(crypto.generate_bcrypt_hash),
    "unixTimestampToDate": Direct(crypto.unix_timestamp_to_date),
    "dateToUnixTimestamp": WithOptions(
        crypto.date_to_unix_timestamp,
        OptionSpec("inMilliseconds", False, FLAG, "in_milliseconds"),
    ),
    "generateChecksum": Direct(crypto.generate_checksum),
}

FORMATTER_FUNCTIONS: Dict[str, TransformFunction] = {
    "formatJSON": WithOptions(formatters.format_json, OptionSpec("indent", 2, NUMBER)),
    "minifyJSON": Direct(formatters.minify_json),
    "formatSQL": Direct(formatters.format_sql),
    "minifySQL": Direct(formatters.minify_sql),
    "formatXML": Direct(formatters.format_xml),
    "minifyXML": Direct(formatters.minify_xml),
    "formatCSS": Direct(formatters.format_css),
    "minifyCSS": Direct(formatters.minify_css),
    "formatJavaScript": Direct(formatters.format_javascript),
    "minifyJavaScript": Direct(formatters.minify_javascript),
    "formatHTML": Direct(formatters.format_html),
    "minifyHTML": Direct(formatters.minify_html),
    "formatYAML": Direct(formatters.format_yaml),
    "jsonToYAML": Direct(formatters.json_to_yaml),
    "yamlToJSON": Direct(formatters.yaml_to_json),
}

CONVERTER_FUNCTIONS: Dict[str, TransformFunction] = {
    "markdownToHTML": Direct(converters.markdown_to_html),
    "htmlToMarkdown": Direct(converters.html_to_markdown),
    "curlToCode": WithOptions(converters.curl_to_code, OptionSpec("language", "javascript")),
    "csvToJSON": WithOptions(
        converters.csv_to_json,
        OptionSpec("hasHeader", True, FLAG, "has_header"),
    ),
    "jsonToCSV": Direct(converters.json_to_csv),
    "xmlToJSON": Direct(converters.xml_to_json),
    "jsonToXML": Direct(converters.json_to_xml),
}

COLOR_FUNCTIONS: Dict[str, TransformFunction] = {
    "hexToRgb": Direct(colors.hex_to_rgb),
    "rgbToHex": Direct(colors.rgb_to_hex),
    "hexToHsl": Direct(colors.hex_to_hsl),
    "hslToHex": Direct(colors.hsl_to_hex),
    "hexToDecimal": Direct(colors.hex_to_decimal),
    "decimalToHex": Direct(colors.decimal_to_hex),
    "hexToRgba": WithOptions(colors.hex_to_rgba, OptionSpec("alpha", 1.0, NUMBER)),
    "generateRandomHexColor": Generator(colors.generate_random_hex_color),
    "getComplementaryColor": Direct(colors.get_complementary_color),
    "hexToCssVariable": WithOptions(
        colors.hex_to_css_variable,
        OptionSpec("variableName", "color-primary", TEXT, "variable_name"),
    ),
    "parseColor": Serialized(colors.parse_color),
}

GENERATOR_FUNCTIONS: Dict[str, TransformFunction] = {
    "generatePassword": Generator(
        generators.generate_password,
        OptionSpec("length", 16, NUMBER),
        OptionSpec("uppercase", True, FLAG),
        OptionSpec("lowercase", True, FLAG),
        OptionSpec("numbers", True, FLAG),
        OptionSpec("symbols", True, FLAG),
    ),
    "generateLoremIpsum": Generator(
        generators.generate_lorem_ipsum,
        OptionSpec("paragraphs", 1, NUMBER),
        OptionSpec("wordsPerParagraph", 50, NUMBER, "words_per_paragraph"),
    ),
    "generateRandomString": Generator(
        generators.generate_random_string,
        OptionSpec("length", 32, NUMBER),
        OptionSpec("charset", "alphanumeric"),
    ),
    "generateSlug": Generator(generators.generate_slug, OptionSpec("words", 3, NUMBER)),
    "generateIPv4": Generator(generators.generate_ipv4),
    "generateIPv6": Generator(generators.generate_ipv6),
    "generateMacAddress": Generator(generators.generate_mac_address, OptionSpec("separator", ":")),
    "generateApiKey": Generator(generators.generate_api_key, OptionSpec("prefix", "sk")),
    "generateRandomUsername": Generator(generators.generate_random_username),
    "generateRandomEmail": Generator(generators.generate_random_email, OptionSpec("domain", "example.com")),
    "generateRandomPhone": Generator(generators.generate_random_phone, OptionSpec("format", "us")),
    "generateRandomDate": Generator(generators.generate_random_date),
    "generateTestCreditCard": Generator(generators.generate_test_credit_card, OptionSpec("type", "visa")),
}

CIPHER_FUNCTIONS: Dict[str, TransformFunction] = {
    "rot13": Direct(ciphers.rot13),
    "caesarEncode": WithOptions(ciphers.caesar_encode, OptionSpec("shift", 3, NUMBER)),
    "caesarDecode": WithOptions(ciphers.caesar_decode, OptionSpec("shift", 3, NUMBER)),
    "atbash": Direct(ciphers.atbash),
    "textToMorse": Direct(ciphers.text_to_morse),
    "morseToText": Direct(ciphers.morse_to_text),
    "vigenereEncode": WithKey(ciphers.vigenere_encode),
    "vigenereDecode": WithKey(ciphers.vigenere_decode),
    "reverseString": Direct(ciphers.reverse_string),
    "reverseWords": Direct(ciphers.reverse_words),
    "toPigLatin": Direct(ciphers.to_pig_latin),
    "textToNato": Direct(ciphers.text_to_nato),
    "rot47": Direct(ciphers.rot47),
    "xorCipher": WithKey(ciphers.xor_cipher),
    "substitutionCipher": WithOptions(
        ciphers.substitution_cipher,
        OptionSpec("alphabet", ciphers.DEFAULT_SUBSTITUTION_ALPHABET),
    ),
}

BUILTIN_FUNCTION_GROUPS = (
    NAMING_FUNCTIONS,
    ENCODING_FUNCTIONS,
    CRYPTO_FUNCTIONS,
    FORMATTER_FUNCTIONS,
    CONVERTER_FUNCTIONS,
    COLOR_FUNCTIONS,
    GENERATOR_FUNCTIONS,
    CIPHER_FUNCTIONS,
)


def build_function_registry() -> FunctionRegistry:
    """Register every built-in transform function and freeze the registry."""
    registry = FunctionRegistry()
    for group in BUILTIN_FUNCTION_GROUPS:
        registry.register_all(group)
    logger.debug("Registered %d transform functions", len(registry))
    return registry.freeze()
