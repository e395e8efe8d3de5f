"""
Parser for the small grammar used inside configuration comments.

A configuration comment has the shape::

    <label> <value> -- <justification>

where the label names the directive (``eslint-disable``, ``eslint`` and so
on), the value is directive specific (a rule list, a rule configuration
object) and the justification is free text.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Optional

JUSTIFICATION_SEPARATOR = re.compile(r"\s-{2,}\s")

DIRECTIVE_LABEL = re.compile(
    r"^(eslint(?:-env|-enable|-disable(?:(?:-next)?-line)?)?|exported|globals?)(?:\s|$)"
)

VALID_SEVERITIES = (0, 1, 2, "off", "warn", "error")

# Tokens of the lenient rule-configuration notation
_CONFIG_TOKEN = re.compile(
    r"""\s*(?:
        (?P<string>"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*')
      | (?P<punct>[{}\[\]:,])
      | (?P<word>[^\s{}\[\]:,"']+)
    )""",
    re.VERBOSE | re.DOTALL,
)
_NUMBER = re.compile(r"^-?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_BARE_KEY = re.compile(r"([-a-zA-Z0-9/]+):")
_MISSING_COMMA = re.compile(r'(\]|[0-9])\s+(?=")')

MAX_CONFIG_DEPTH = 100


@dataclass(frozen=True)
class DirectiveComment:
    """A configuration comment split into its parts."""

    label: str
    value: str
    justification: str = ""


@dataclass(frozen=True)
class ConfigParseResult:
    """Outcome of parsing a rule-configuration string."""

    ok: bool
    config: Optional[dict[str, Any]] = None
    error: Optional[str] = None


def split_justification(text: str) -> tuple[str, str]:
    """
    Split comment text into the directive part and its justification.

    Text after a second separator is discarded.
    """
    parts = JUSTIFICATION_SEPARATOR.split(text)
    justification = parts[1] if len(parts) > 1 else ""
    return parts[0].strip(), justification.strip()


def is_valid_severity(value: Any) -> bool:
    """Whether value is a severity number or name."""
    if isinstance(value, bool):
        return False
    return value in VALID_SEVERITIES


def is_every_severity_valid(config: dict[str, Any]) -> bool:
    """Whether every rule entry starts with a valid severity."""
    for value in config.values():
        if isinstance(value, list):
            if not value or not is_valid_severity(value[0]):
                return False
        elif not is_valid_severity(value):
            return False
    return True


class _ConfigReader:
    """Reads the brace-optional ``key: value`` notation used by rule comments."""

    def __init__(self, text: str) -> None:
        self.tokens = self._tokenize(text)
        self.pos = 0
        self.depth = 0

    @staticmethod
    def _tokenize(text: str) -> list[tuple[str, str]]:
        tokens = []
        pos = 0
        stripped_end = len(text.rstrip())
        while pos < stripped_end:
            match = _CONFIG_TOKEN.match(text, pos)
            if not match or match.end() == pos:
                raise ValueError(f"Unexpected character at {pos}")
            kind = match.lastgroup or "word"
            tokens.append((kind, match.group(kind)))
            pos = match.end()
        return tokens

    def peek(self) -> Optional[tuple[str, str]]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> tuple[str, str]:
        token = self.peek()
        if token is None:
            raise ValueError("Unexpected end of input")
        self.pos += 1
        return token

    def expect(self, punct: str) -> None:
        kind, text = self.advance()
        if kind != "punct" or text != punct:
            raise ValueError(f"Expected '{punct}' but found '{text}'")

    def read(self) -> dict[str, Any]:
        """Read a whole configuration; the outer braces are optional."""
        if self.tokens and self.tokens[0] == ("punct", "{") and self.tokens[-1] == (
            "punct",
            "}",
        ):
            self.advance()
            result = self.read_members(closing="}")
            self.expect("}")
        else:
            result = self.read_members(closing=None)
        if self.peek() is not None:
            raise ValueError("Unexpected trailing input")
        return result

    def read_members(self, closing: Optional[str]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        while True:
            token = self.peek()
            if token is None or token == ("punct", closing):
                return result
            if token == ("punct", ","):
                self.advance()
                continue

            kind, text = self.advance()
            if kind == "punct":
                raise ValueError(f"Unexpected '{text}'")
            key = self._unquote(text) if kind == "string" else text
            self.expect(":")
            result[key] = self.read_value()

    def read_value(self) -> Any:
        kind, text = self.advance()
        if kind == "string":
            return self._unquote(text)
        if kind == "word":
            return self._coerce(text)
        if text == "[":
            self._enter()
            items = []
            while True:
                token = self.peek()
                if token == ("punct", "]"):
                    self.advance()
                    self.depth -= 1
                    return items
                if token == ("punct", ","):
                    self.advance()
                    continue
                items.append(self.read_value())
        if text == "{":
            self._enter()
            members = self.read_members(closing="}")
            self.expect("}")
            self.depth -= 1
            return members
        raise ValueError(f"Unexpected '{text}'")

    def _enter(self) -> None:
        self.depth += 1
        if self.depth > MAX_CONFIG_DEPTH:
            raise ValueError(f"Nesting depth exceeds limit {MAX_CONFIG_DEPTH}")

    @staticmethod
    def _unquote(text: str) -> str:
        body = text[1:-1]
        return re.sub(r"\\(.)", r"\1", body, flags=re.DOTALL)

    @staticmethod
    def _coerce(word: str) -> Any:
        if word == "true":
            return True
        if word == "false":
            return False
        if word in ("null", "undefined"):
            return None
        if _NUMBER.match(word):
            if "." in word or "e" in word.lower():
                return float(word)
            return int(word)
        return word


class ConfigCommentParser:
    """Parses directive comments and the configuration values they carry."""

    def parse_directive(self, text: str) -> Optional[DirectiveComment]:
        """Split comment text into label, value and justification."""
        directive_part, justification = split_justification(text)
        match = DIRECTIVE_LABEL.match(directive_part)
        if not match:
            return None

        label = match.group(1)
        value = directive_part[len(label) :].strip()
        return DirectiveComment(label=label, value=value, justification=justification)

    def parse_json_like_config(self, text: str) -> ConfigParseResult:
        """Parse a rule-configuration value such as ``rule-a: "error", rule-b: 0``."""
        try:
            items = _ConfigReader(text).read()
        except ValueError:
            items = None

        # Invalid severities mean the value was not meant as this notation
        if items is not None and is_every_severity_valid(items):
            return ConfigParseResult(ok=True, config=items)

        normalized = _BARE_KEY.sub(r'"\1":', text)
        normalized = _MISSING_COMMA.sub(r"\1,", normalized, count=1)
        try:
            config = json.loads(f"{{{normalized}}}")
        except (json.JSONDecodeError, RecursionError) as exc:
            return ConfigParseResult(
                ok=False,
                error=f"Failed to parse JSON from '{normalized}': {exc}",
            )

        if not isinstance(config, dict):
            return ConfigParseResult(
                ok=False,
                error=f"Failed to parse JSON from '{normalized}': expected an object",
            )
        return ConfigParseResult(ok=True, config=config)

    def parse_string_config(self, text: str) -> dict[str, Optional[str]]:
        """Parse ``name:value`` pairs such as a globals list."""
        items: dict[str, Optional[str]] = {}
        collapsed = re.sub(r"(?<!\s)\s*([:,])\s*", r"\1", text.strip())

        for name in re.split(r"\s|,+", collapsed):
            if not name:
                continue
            key, separator, value = name.partition(":")
            items[key] = value if separator else None
        return items

    def parse_list_config(self, text: str) -> list[str]:
        """Parse a comma-separated list, dropping optional quotes and duplicates."""
        items: dict[str, None] = {}
        for name in text.split(","):
            trimmed = re.sub(
                r"^(?P<quote>['\"]?)(?P<name>.*)(?P=quote)$",
                r"\g<name>",
                name.strip(),
                flags=re.DOTALL,
            )
            if trimmed:
                items[trimmed] = None
        return list(items)
