"""
Classical ciphers and playful encodings.

Caesar, ROT13/ROT47, Atbash, Vigenère, Morse, NATO phonetic, Pig Latin and
friends. Only ASCII letters are shifted; everything else passes through.
"""

import re
import string

DEFAULT_SUBSTITUTION_ALPHABET = "ZYXWVUTSRQPONMLKJIHGFEDCBA"

MORSE_CODE = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
    "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..", "0": "-----", "1": ".----", "2": "..---",
    "3": "...--", "4": "....-", "5": ".....", "6": "-....", "7": "--...",
    "8": "---..", "9": "----.", ".": ".-.-.-", ",": "--..--", "?": "..--..",
    "'": ".----.", "!": "-.-.--", "/": "-..-.", "(": "-.--.", ")": "-.--.-",
    "&": ".-...", ":": "---...", ";": "-.-.-.", "=": "-...-", "+": ".-.-.",
    "-": "-....-", "_": "..--.-", '"': ".-..-.", "$": "...-..-", "@": ".--.-.",
    " ": "/",
}
_MORSE_REVERSE = {code: char for char, code in MORSE_CODE.items()}

NATO_ALPHABET = {
    "A": "Alpha", "B": "Bravo", "C": "Charlie", "D": "Delta", "E": "Echo",
    "F": "Foxtrot", "G": "Golf", "H": "Hotel", "I": "India", "J": "Juliet",
    "K": "Kilo", "L": "Lima", "M": "Mike", "N": "November", "O": "Oscar",
    "P": "Papa", "Q": "Quebec", "R": "Romeo", "S": "Sierra", "T": "Tango",
    "U": "Uniform", "V": "Victor", "W": "Whiskey", "X": "X-ray", "Y": "Yankee",
    "Z": "Zulu", "0": "Zero", "1": "One", "2": "Two", "3": "Three", "4": "Four",
    "5": "Five", "6": "Six", "7": "Seven", "8": "Eight", "9": "Niner",
}

_LETTER = re.compile(r"[a-zA-Z]")
_PIG_LATIN_WORD = re.compile(r"\b([bcdfghjklmnpqrstvwxyz]*)(\w+)", re.IGNORECASE | re.ASCII)


def _shift_letter(char: str, shift: int) -> str:
    base = ord("a") if char.islower() else ord("A")
    return chr((ord(char) - base + shift) % 26 + base)


def caesar_encode(text: str, shift: int = 3) -> str:
    """'Hello' -> 'Khoor' with the default shift of 3."""
    return _LETTER.sub(lambda m: _shift_letter(m.group(0), shift), text)


def caesar_decode(text: str, shift: int = 3) -> str:
    return caesar_encode(text, -shift)


def rot13(text: str) -> str:
    """Self-inverse: rot13(rot13(x)) == x."""
    return caesar_encode(text, 13)


def rot47(text: str) -> str:
    """Rotate every printable ASCII character from '!' to '~' by 47."""
    return "".join(
        chr(33 + (ord(char) - 33 + 47) % 94) if "!" <= char <= "~" else char
        for char in text
    )


def atbash(text: str) -> str:
    """Mirror the alphabet: A <-> Z, B <-> Y."""
    def mirror(match: re.Match) -> str:
        char = match.group(0)
        base = ord("a") if char.islower() else ord("A")
        return chr(base + 25 - (ord(char) - base))

    return _LETTER.sub(mirror, text)


def text_to_morse(text: str) -> str:
    """'SOS' -> '... --- ...'; spaces become '/'."""
    return " ".join(MORSE_CODE.get(char, char) for char in text.upper())


def morse_to_text(text: str) -> str:
    return "".join(
        " " if code == "/" else _MORSE_REVERSE.get(code, code)
        for code in text.split(" ")
        if code
    )


def _vigenere_shifts(key: str):
    return [ord(char) - ord("A") for char in key.upper() if char in string.ascii_uppercase]


def _vigenere(text: str, key: str, direction: int) -> str:
    if not key:
        return "Key required for Vigenère cipher"
    shifts = _vigenere_shifts(key)
    if not shifts:
        return "Key must contain letters"

    position = 0

    def shift(match: re.Match) -> str:
        nonlocal position
        result = _shift_letter(match.group(0), direction * shifts[position % len(shifts)])
        position += 1
        return result

    return _LETTER.sub(shift, text)


def vigenere_encode(text: str, key: str) -> str:
    """'HELLO' with key 'KEY' -> 'RIJVS'. The key only advances on letters."""
    return _vigenere(text, key, 1)


def vigenere_decode(text: str, key: str) -> str:
    return _vigenere(text, key, -1)


def text_to_nato(text: str) -> str:
    """'SOS' -> 'Sierra Oscar Sierra'"""
    return " ".join(NATO_ALPHABET.get(char, char) for char in text.upper())


def to_pig_latin(text: str) -> str:
    """Move leading consonants to the end plus 'ay'; vowel-initial words get 'way'."""
    def translate(match: re.Match) -> str:
        consonants, rest = match.group(1), match.group(2)
        if not consonants:
            return rest + "way"
        return rest + consonants.lower() + "ay"

    return _PIG_LATIN_WORD.sub(translate, text)


def reverse_string(text: str) -> str:
    return text[::-1]


def reverse_words(text: str) -> str:
    """Reverse the letters of each space-separated word, keeping word order."""
    return " ".join(word[::-1] for word in text.split(" "))


def xor_cipher(text: str, key: str) -> str:
    """XOR each character with the repeating key. Applying it twice restores the input."""
    if not key:
        return "Key required for XOR cipher"
    return "".join(
        chr(ord(char) ^ ord(key[index % len(key)]))
        for index, char in enumerate(text)
    )


def substitution_cipher(text: str, alphabet: str = DEFAULT_SUBSTITUTION_ALPHABET) -> str:
    """Replace A-Z with the letters of ``alphabet``, preserving case."""
    if len(alphabet) != 26:
        return "Alphabet must be exactly 26 characters"
    upper = alphabet.upper()
    table = str.maketrans(
        string.ascii_uppercase + string.ascii_lowercase,
        upper + upper.lower(),
    )
    return text.translate(table)
