"""Minimal evaluator for the Go ``text/template`` syntax used by config templates.

Supported constructs:

- literal text, copied as-is;
- ``{{ . }}`` and ``{{ .Field.Sub }}`` to print the current value or a field
  of it;
- ``{{ range .Field }}...{{ else }}...{{ end }}`` to repeat a block for each
  element of a sequence, the element becoming the current value;
- ``{{/* comment */}}``;
- trim markers: ``{{- `` strips the whitespace before the action and `` -}}``
  strips the whitespace after it.

This is enough for golangci-lint configuration templates such as::

    linters:
      enable:
      {{- range .LinterList }}
        - {{ . }}
      {{- end }}
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, is_dataclass
from dataclasses import fields as dataclass_fields
from typing import Any

from .exceptions import TemplateError

# Whitespace removed by trim markers, as defined by text/template
TRIM_WHITESPACE = " \t\r\n"

# An action runs from "{{" to the first "}}" after it, except that a comment
# runs to the first "}}" after its closing "*/"
ACTION_PATTERN = re.compile(
    r"\{\{((?:-\s+)?/\*.*?\*/(?:\s+-)?|.*?)\}\}", re.DOTALL
)

# "." or a chain of field names such as ".LinterList" or ".Linters.Enable"
FIELD_PATTERN = re.compile(r"^(?:\.|(?:\.[A-Za-z_][A-Za-z0-9_]*)+)$")

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*")


@dataclass
class TextNode:
    """Literal text."""

    text: str


@dataclass
class FieldNode:
    """Reference to the current value or one of its fields.

    Attributes:
        fields: Field names to follow from the current value, empty for ".".
        line: Line of the action in the template source.

    """

    fields: tuple[str, ...]
    line: int

    @classmethod
    def parse(cls, expression: str, line: int) -> FieldNode:
        """Build a field reference from an expression like ``.A.B``.

        Args:
            expression: The expression text.
            line: Line of the action in the template source.

        Returns:
            The parsed field reference.

        Raises:
            TemplateError: If the expression is not a field reference.

        """
        if FIELD_PATTERN.match(expression):
            fields = tuple(name for name in expression.split(".") if name)
            return cls(fields=fields, line=line)

        identifier = IDENTIFIER_PATTERN.match(expression)
        if identifier:
            msg = f'function "{identifier.group(0)}" not defined'
        else:
            msg = f"unexpected {expression!r} in command"
        raise TemplateError(msg, line=line)

    def evaluate(self, dot: Any) -> Any:
        """Resolve the reference against the current value.

        Args:
            dot: The current value.

        Returns:
            The referenced value.

        Raises:
            TemplateError: If a field cannot be found.

        """
        value = dot
        for name in self.fields:
            if isinstance(value, Mapping):
                if name not in value:
                    msg = f"map has no entry for key {name!r}"
                    raise TemplateError(msg, line=self.line)
                value = value[name]
            elif _is_exported_field(name, value):
                value = getattr(value, name)
            else:
                msg = f"can't evaluate field {name} in type {type(value).__name__}"
                raise TemplateError(msg, line=self.line)
        return value


@dataclass
class RangeNode:
    """A ``range`` block.

    Attributes:
        pipeline: The sequence to iterate over.
        body: Nodes rendered once per element.
        else_body: Nodes rendered when the sequence is empty.
        in_else: Whether the parser is currently filling ``else_body``.

    """

    pipeline: FieldNode
    body: list[Node] = field(default_factory=list)
    else_body: list[Node] = field(default_factory=list)
    in_else: bool = False

    def items(self, dot: Any) -> list[Any]:
        """Evaluate the pipeline into the list of elements to iterate.

        Mappings are iterated by value in key order, as text/template does.

        Args:
            dot: The current value.

        Returns:
            The elements to render the body with.

        Raises:
            TemplateError: If the value cannot be iterated.

        """
        value = self.pipeline.evaluate(dot)
        if isinstance(value, Mapping):
            return [value[key] for key in sorted(value)]
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            msg = f"range can't iterate over {value!r}"
            raise TemplateError(msg, line=self.pipeline.line)
        return list(value)


Node = TextNode | FieldNode | RangeNode


def format_value(value: Any) -> str:
    """Format a value the way text/template prints it.

    Args:
        value: The value to print.

    Returns:
        The printed form.

    """
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Mapping):
        pairs = (
            f"{format_value(key)}:{format_value(value[key])}" for key in sorted(value)
        )
        return "map[" + " ".join(pairs) + "]"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(format_value(item) for item in value) + "]"
    return str(value)


def _is_exported_field(name: str, value: Any) -> bool:
    """Check whether a name is a field a template may read from a value.

    Only dataclass fields starting with an uppercase letter qualify, the
    counterpart of exported struct fields in Go. Methods, dunder names and
    other attributes are never reachable.

    Args:
        name: Field name from the template.
        value: Object the field is looked up on.

    Returns:
        True if the field can be read.

    """
    if not name[:1].isupper() or not is_dataclass(value) or isinstance(value, type):
        return False
    return name in {item.name for item in dataclass_fields(value)}


def _is_trim_space(char: str) -> bool:
    return bool(char) and char in TRIM_WHITESPACE


@dataclass
class Template:
    """A parsed template, ready to be executed against data."""

    nodes: list[Node]

    @classmethod
    def parse(cls, source: str) -> Template:
        """Parse template source.

        Args:
            source: The template text.

        Returns:
            The parsed template.

        Raises:
            TemplateError: If the source is not a valid template.

        """
        root: list[Node] = []
        # Open range blocks, innermost last
        stack: list[RangeNode] = []
        trim_next = False
        position = 0

        def current() -> list[Node]:
            if not stack:
                return root
            block = stack[-1]
            return block.else_body if block.in_else else block.body

        def add_text(text: str) -> None:
            if "{{" in text:
                offset = source.index("{{", position)
                msg = "unclosed action"
                raise TemplateError(msg, line=source.count("\n", 0, offset) + 1)
            if text:
                current().append(TextNode(text=text))

        for match in ACTION_PATTERN.finditer(source):
            line = source.count("\n", 0, match.start()) + 1
            inner = match.group(1)

            trim_left = inner.startswith("-") and _is_trim_space(inner[1:2])
            trim_right = inner.endswith("-") and _is_trim_space(inner[-2:-1])
            if trim_left:
                inner = inner[2:]
            if trim_right:
                inner = inner[:-2]

            text = source[position : match.start()]
            if trim_next:
                text = text.lstrip(TRIM_WHITESPACE)
            if trim_left:
                text = text.rstrip(TRIM_WHITESPACE)
            add_text(text)
            position = match.end()
            trim_next = trim_right

            action = inner.strip(TRIM_WHITESPACE)
            if action.startswith("/*") and action.endswith("*/"):
                continue
            if not action:
                msg = "missing value for command"
                raise TemplateError(msg, line=line)

            keyword, *rest = action.split(maxsplit=1)
            argument = rest[0] if rest else ""

            if keyword in {"end", "else"} and argument:
                msg = f"unexpected {argument!r} in {keyword}"
                raise TemplateError(msg, line=line)

            if keyword == "end":
                if not stack:
                    msg = "unexpected {{end}}"
                    raise TemplateError(msg, line=line)
                stack.pop()
            elif keyword == "else":
                if not stack or stack[-1].in_else:
                    msg = "unexpected {{else}}"
                    raise TemplateError(msg, line=line)
                stack[-1].in_else = True
            elif keyword == "range":
                if not argument:
                    msg = "missing value for range"
                    raise TemplateError(msg, line=line)
                block = RangeNode(pipeline=FieldNode.parse(argument, line))
                current().append(block)
                stack.append(block)
            else:
                current().append(FieldNode.parse(action, line))

        text = source[position:]
        if trim_next:
            text = text.lstrip(TRIM_WHITESPACE)
        add_text(text)

        if stack:
            msg = "unexpected EOF, range has no matching {{end}}"
            raise TemplateError(msg, line=stack[-1].pipeline.line)

        return cls(nodes=root)

    def execute(self, data: Any) -> str:
        """Render the template.

        Args:
            data: The initial current value, usually a mapping of bindings.

        Returns:
            The rendered text.

        Raises:
            TemplateError: If a field reference or range cannot be evaluated.

        """
        parts: list[str] = []
        self._render(dot=data, nodes=self.nodes, parts=parts)
        return "".join(parts)

    def _render(self, *, dot: Any, nodes: list[Node], parts: list[str]) -> None:
        for node in nodes:
            if isinstance(node, TextNode):
                parts.append(node.text)
            elif isinstance(node, FieldNode):
                parts.append(format_value(node.evaluate(dot)))
            else:
                items = node.items(dot)
                if not items:
                    self._render(dot=dot, nodes=node.else_body, parts=parts)
                for item in items:
                    self._render(dot=item, nodes=node.body, parts=parts)
