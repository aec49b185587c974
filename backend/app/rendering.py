from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Union

HEADING_MARKER = "### "
CODE_DELIMITER = "`"


@dataclass(frozen=True)
class Heading:
	text: str
	kind: Literal["heading"] = "heading"


@dataclass(frozen=True)
class Code:
	text: str
	kind: Literal["code"] = "code"


@dataclass(frozen=True)
class Paragraph:
	text: str
	kind: Literal["paragraph"] = "paragraph"


Block = Union[Heading, Code, Paragraph]


def classify_line(line: str) -> Block:
	if line.startswith(HEADING_MARKER):
		return Heading(line[len(HEADING_MARKER):])
	if line.startswith(CODE_DELIMITER) and line.endswith(CODE_DELIMITER):
		return Code(line[1:-1])
	return Paragraph(line)


def render_result(text: str) -> list[Block]:
	return [classify_line(line) for line in text.split("\n")]
