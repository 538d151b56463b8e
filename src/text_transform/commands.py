"""
Text Transform Short Commands

Terse command names for the ``txtx run`` CLI entry point, mapped onto
function-registry names. Commands are grouped for display:

    camel               -> toCamelCase
    base64 encode       -> base64Encode
    base64 decode       -> base64Decode
    caesar decode -s 5  -> caesarDecode {"shift": 5}

A command either maps to a single function or carries subcommands; the
command's own function is the default subcommand. Generator commands need
no input. Some take an optional positional value instead (``password 24``).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Tuple

from text_transform.exceptions import CommandError
from text_transform.functions import FunctionRegistry
from text_transform.runner import run_function

# Display order for `txtx commands`
GROUP_ORDER = (
    "naming",
    "encoding",
    "crypto",
    "formatters",
    "converters",
    "colors",
    "generators",
    "ciphers",
)


class Subcommand(NamedTuple):
    name: str
    function: str
    description: str


class InputOption(NamedTuple):
    """Positional input that feeds a generator option (``password 24``)."""

    key: str
    type: type = str

    def parse(self, text: str) -> Optional[Any]:
        text = text.strip()
        if not text:
            return None
        if self.type is int:
            try:
                return int(text)
            except ValueError:
                return None
        return text


@dataclass(frozen=True)
class Command:
    """One short command.

    Attributes:
        name: Command word typed on the command line
        function: Function-registry name run when no subcommand is given
        description: One-line help text
        group: Display group (see GROUP_ORDER)
        subcommands: Alternative functions selected by a second word
        generator: True if the command runs without input
        options: Fixed options passed on every call
        flags: CLI flag name -> option key (e.g. ``{"shift": "shift"}``)
        flag_defaults: Option values used when a mapped flag is not given
        input_option: For generators, the option the positional input feeds
    """

    name: str
    function: str
    description: str
    group: str
    subcommands: Tuple[Subcommand, ...] = ()
    generator: bool = False
    options: Mapping[str, Any] = field(default_factory=dict)
    flags: Mapping[str, str] = field(default_factory=dict)
    flag_defaults: Mapping[str, Any] = field(default_factory=dict)
    input_option: Optional[InputOption] = None

    def get_subcommand(self, name: str) -> Optional[Subcommand]:
        for sub in self.subcommands:
            if sub.name == name:
                return sub
        return None

    def function_for(self, subcommand: Optional[str] = None) -> str:
        """Function-registry name for ``subcommand`` (or the default).

        Raises:
            CommandError: If the subcommand is not defined for this command
        """
        if not subcommand:
            return self.function
        sub = self.get_subcommand(subcommand)
        if sub is None:
            raise CommandError(
                f"Unknown subcommand: {subcommand} for command: {self.name}",
                remediation=self.usage_hint(),
            )
        return sub.function

    def build_options(self, text: str = "", **flag_values: Any) -> Dict[str, Any]:
        """Options for one call: fixed options, then flags, then input."""
        options = dict(self.options)
        for flag, key in self.flags.items():
            value = flag_values.get(flag)
            if value is None:
                value = self.flag_defaults.get(key)
            if value is not None:
                options[key] = value
        if self.input_option is not None:
            value = self.input_option.parse(text)
            if value is not None:
                options[self.input_option.key] = value
        return options

    def functions(self) -> List[str]:
        """Every function name this command can run."""
        names = [self.function]
        names.extend(sub.function for sub in self.subcommands if sub.function not in names)
        return names

    def usage_hint(self) -> str:
        if self.subcommands:
            choices = "|".join(sub.name for sub in self.subcommands)
            return f"Use: txtx run {self.name} [{choices}] <input>"
        return f"Use: txtx run {self.name} <input>"


def _pair(
    name: str,
    group: str,
    description: str,
    encode: Tuple[str, str],
    decode: Tuple[str, str],
    names: Tuple[str, str] = ("encode", "decode"),
    **kwargs: Any,
) -> Command:
    """Command with two subcommands; the first is the default."""
    return Command(
        name=name,
        function=encode[0],
        description=description,
        group=group,
        subcommands=(
            Subcommand(names[0], encode[0], encode[1]),
            Subcommand(names[1], decode[0], decode[1]),
        ),
        **kwargs,
    )


def _formatter(name: str, label: str, format_fn: str, minify_fn: str) -> Command:
    return _pair(
        name,
        "formatters",
        f"{label} format/minify",
        (format_fn, f"Format {label}"),
        (minify_fn, f"Minify {label}"),
        names=("format", "minify"),
    )


_KEY = {"key": "key"}
_SHIFT = {"shift": "shift"}
_DEFAULT_KEY = {"key": "key"}

_COMMAND_LIST: Tuple[Command, ...] = (
    # Naming conventions
    Command("camel", "toCamelCase", "Convert to camelCase", "naming"),
    Command("pascal", "toPascalCase", "Convert to PascalCase", "naming"),
    Command("snake", "toSnakeCase", "Convert to snake_case", "naming"),
    Command("screaming", "toScreamingSnakeCase", "Convert to SCREAMING_SNAKE_CASE", "naming"),
    Command("kebab", "toKebabCase", "Convert to kebab-case", "naming"),
    Command("train", "toTrainCase", "Convert to Train-Case", "naming"),
    Command("dot", "toDotCase", "Convert to dot.case", "naming"),
    Command("path", "toPathCase", "Convert to path/case", "naming"),
    Command("namespace", "toNamespaceCase", "Convert to namespace\\case", "naming"),
    Command("ada", "toAdaCase", "Convert to Ada_Case", "naming"),
    Command("cobol", "toCobolCase", "Convert to COBOL-CASE", "naming"),
    Command("flat", "toFlatCase", "Convert to flatcase", "naming"),
    Command("upperflat", "toUpperFlatCase", "Convert to UPPERFLATCASE", "naming"),
    Command("detect", "detectNamingConvention", "Detect naming convention", "naming"),
    # Encoding
    _pair("base64", "encoding", "Base64 encode/decode",
          ("base64Encode", "Encode to Base64"), ("base64Decode", "Decode from Base64")),
    _pair("base32", "encoding", "Base32 encode/decode",
          ("base32Encode", "Encode to Base32"), ("base32Decode", "Decode from Base32")),
    _pair("url", "encoding", "URL encode/decode",
          ("urlEncode", "URL encode"), ("urlDecode", "URL decode")),
    _pair("html", "encoding", "HTML entity encode/decode",
          ("htmlEncode", "Encode HTML entities"), ("htmlDecode", "Decode HTML entities")),
    _pair("binary", "encoding", "Binary encode/decode",
          ("textToBinary", "Text to binary"), ("binaryToText", "Binary to text")),
    _pair("hex", "encoding", "Hexadecimal encode/decode",
          ("textToHex", "Text to hex"), ("hexToText", "Hex to text")),
    _pair("ascii", "encoding", "ASCII code conversion",
          ("textToAscii", "Text to ASCII codes"), ("asciiToText", "ASCII codes to text")),
    _pair("utf8", "encoding", "UTF-8 encode/decode",
          ("utf8Encode", "UTF-8 encode"), ("utf8Decode", "UTF-8 decode")),
    # Crypto
    Command("md5", "md5Hash", "Generate MD5 hash", "crypto"),
    Command("sha1", "sha1Hash", "Generate SHA-1 hash", "crypto"),
    Command("sha256", "sha256Hash", "Generate SHA-256 hash", "crypto"),
    Command("sha512", "sha512Hash", "Generate SHA-512 hash", "crypto"),
    Command("hmac", "generateHMACSHA256", "Generate HMAC-SHA256", "crypto",
            flags=_KEY, flag_defaults=_DEFAULT_KEY),
    Command("uuid", "generateUUIDv4", "Generate UUID v4", "crypto", generator=True),
    Command("ulid", "generateULID", "Generate ULID", "crypto", generator=True),
    Command("nanoid", "generateNanoID", "Generate Nano ID", "crypto", generator=True,
            input_option=InputOption("size", int)),
    Command("jwt", "decodeJWT", "Decode JWT token", "crypto"),
    Command("checksum", "generateChecksum", "Calculate checksum", "crypto"),
    _pair("timestamp", "crypto", "Unix timestamp conversion",
          ("unixTimestampToDate", "Unix to date"), ("dateToUnixTimestamp", "Date to Unix"),
          names=("todate", "tounix")),
    Command("bcrypt", "generateBcryptHash", "Generate bcrypt format hash", "crypto"),
    # Formatters
    _formatter("json", "JSON", "formatJSON", "minifyJSON"),
    _formatter("sql", "SQL", "formatSQL", "minifySQL"),
    _formatter("xml", "XML", "formatXML", "minifyXML"),
    _formatter("css", "CSS", "formatCSS", "minifyCSS"),
    _formatter("js", "JavaScript", "formatJavaScript", "minifyJavaScript"),
    _formatter("htmlfmt", "HTML", "formatHTML", "minifyHTML"),
    Command("yaml", "formatYAML", "Format YAML", "formatters"),
    Command("json2yaml", "jsonToYAML", "Convert JSON to YAML", "formatters"),
    Command("yaml2json", "yamlToJSON", "Convert YAML to JSON", "formatters"),
    # Converters
    Command("csv2json", "csvToJSON", "Convert CSV to JSON", "converters"),
    Command("json2csv", "jsonToCSV", "Convert JSON to CSV", "converters"),
    Command("xml2json", "xmlToJSON", "Convert XML to JSON", "converters"),
    Command("json2xml", "jsonToXML", "Convert JSON to XML", "converters"),
    Command("md2html", "markdownToHTML", "Convert Markdown to HTML", "converters"),
    Command("html2md", "htmlToMarkdown", "Convert HTML to Markdown", "converters"),
    Command("curl2js", "curlToCode", "Convert cURL to JavaScript fetch", "converters",
            options={"language": "javascript"}),
    Command("curl2py", "curlToCode", "Convert cURL to Python requests", "converters",
            options={"language": "python"}),
    Command("curl2php", "curlToCode", "Convert cURL to PHP", "converters",
            options={"language": "php"}),
    # Colors
    Command("hex2rgb", "hexToRgb", "Convert HEX to RGB", "colors"),
    Command("rgb2hex", "rgbToHex", "Convert RGB to HEX", "colors"),
    Command("hex2hsl", "hexToHsl", "Convert HEX to HSL", "colors"),
    Command("hsl2hex", "hslToHex", "Convert HSL to HEX", "colors"),
    Command("dec2hex", "decimalToHex", "Convert decimal to HEX color", "colors"),
    Command("hex2dec", "hexToDecimal", "Convert HEX color to decimal", "colors"),
    Command("hex2rgba", "hexToRgba", "Convert HEX to RGBA", "colors"),
    Command("randcolor", "generateRandomHexColor", "Generate random color", "colors", generator=True),
    Command("complement", "getComplementaryColor", "Get complementary color", "colors"),
    Command("cssvar", "hexToCssVariable", "Format as CSS variable", "colors",
            flags={"key": "variableName"}),
    Command("parsecolor", "parseColor", "Parse any color format", "colors"),
    # Generators
    Command("password", "generatePassword", "Generate secure password", "generators",
            generator=True, input_option=InputOption("length", int)),
    Command("apikey", "generateApiKey", "Generate API key", "generators",
            generator=True, input_option=InputOption("prefix")),
    Command("ipv4", "generateIPv4", "Generate random IPv4", "generators", generator=True),
    Command("ipv6", "generateIPv6", "Generate random IPv6", "generators", generator=True),
    Command("mac", "generateMacAddress", "Generate random MAC address", "generators", generator=True),
    Command("randstr", "generateRandomString", "Generate random string", "generators",
            generator=True, options={"length": 16}, input_option=InputOption("length", int)),
    Command("lorem", "generateLoremIpsum", "Generate Lorem Ipsum", "generators",
            generator=True, input_option=InputOption("paragraphs", int)),
    Command("randdate", "generateRandomDate", "Generate random date", "generators", generator=True),
    Command("randemail", "generateRandomEmail", "Generate random email", "generators", generator=True),
    Command("randuser", "generateRandomUsername", "Generate random username", "generators", generator=True),
    Command("randphone", "generateRandomPhone", "Generate random phone", "generators", generator=True),
    Command("testcard", "generateTestCreditCard", "Generate test credit card", "generators", generator=True),
    Command("slug", "generateSlug", "Generate URL slug", "generators", generator=True),
    # Ciphers
    _pair("caesar", "ciphers", "Caesar cipher",
          ("caesarEncode", "Encode with Caesar cipher"), ("caesarDecode", "Decode Caesar cipher"),
          flags=_SHIFT),
    Command("rot13", "rot13", "ROT13 cipher", "ciphers"),
    Command("rot47", "rot47", "ROT47 cipher", "ciphers"),
    Command("atbash", "atbash", "Atbash cipher", "ciphers"),
    _pair("vigenere", "ciphers", "Vigenere cipher",
          ("vigenereEncode", "Encode with Vigenere cipher"), ("vigenereDecode", "Decode Vigenere cipher"),
          flags=_KEY, flag_defaults=_DEFAULT_KEY),
    _pair("morse", "ciphers", "Morse code encode/decode",
          ("textToMorse", "Text to Morse"), ("morseToText", "Morse to text")),
    Command("nato", "textToNato", "NATO phonetic alphabet", "ciphers"),
    Command("piglatin", "toPigLatin", "Pig Latin", "ciphers"),
    Command("revwords", "reverseWords", "Reverse words", "ciphers"),
    Command("reverse", "reverseString", "Reverse string", "ciphers"),
    Command("xor", "xorCipher", "XOR cipher", "ciphers", flags=_KEY, flag_defaults=_DEFAULT_KEY),
)

COMMANDS: Dict[str, Command] = {command.name: command for command in _COMMAND_LIST}


def get_command(name: str) -> Optional[Command]:
    return COMMANDS.get(name)


def list_commands() -> List[Command]:
    """All commands sorted by name."""
    return sorted(COMMANDS.values(), key=lambda command: command.name)


def get_commands_by_group() -> Dict[str, List[Command]]:
    """Commands grouped for display, groups in GROUP_ORDER, names sorted."""
    grouped: Dict[str, List[Command]] = {group: [] for group in GROUP_ORDER}
    for command in list_commands():
        grouped.setdefault(command.group, []).append(command)
    return {group: commands for group, commands in grouped.items() if commands}


def find_unresolved_commands(functions: FunctionRegistry) -> List[Tuple[str, str]]:
    """List (command, function name) pairs missing from ``functions``."""
    return [
        (command.name, name)
        for command in _COMMAND_LIST
        for name in command.functions()
        if not functions.has(name)
    ]


async def execute_command(
    functions: FunctionRegistry,
    command_name: str,
    subcommand: Optional[str] = None,
    text: str = "",
    **flag_values: Any,
) -> str:
    """Run a short command.

    Args:
        functions: Function registry to resolve names against
        command_name: Command word (e.g. "base64")
        subcommand: Optional subcommand word (e.g. "decode")
        text: Input text
        **flag_values: CLI flag values (``key``, ``shift``)

    Returns:
        The transformation result as a string.

    Raises:
        CommandError: If the command, subcommand or its function is unknown
    """
    command = COMMANDS.get(command_name)
    if command is None:
        raise CommandError(
            f"Unknown command '{command_name}'",
            remediation="Run 'txtx commands' to see available commands",
        )
    name = command.function_for(subcommand)
    result = await run_function(functions, name, text, command.build_options(text, **flag_values))
    if result is None:
        raise CommandError(f"Command '{command_name}' maps to unregistered function '{name}'")
    return str(result)
