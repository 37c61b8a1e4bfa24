"""
Puzzle Description Reader
=========================
Builds a Puzzle from its XML description:

    <puzzle>
      <clues type="rows">
        <line><count color="red">2</count></line>
        ...
      </clues>
      <clues type="columns">
        ...
      </clues>
    </puzzle>

The tree walking only relies on the small DocumentNode protocol (tag, text,
`get` and plain path queries through `find`/`findall`, no attribute
predicates), so any ElementTree-like document works.
"""
from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable, Optional, Protocol, Union

from nonogram.config import DEFAULT_CLUE_COLOR
from nonogram.model.errors import ClueValueError, StructureError
from nonogram.model.puzzle import Clue, ClueLine, Puzzle

logger = logging.getLogger(__name__)

PUZZLE_TAG = "puzzle"
CLUES_TAG = "clues"
LINE_TAG = "line"
COUNT_TAG = "count"
ROWS_TYPE = "rows"
COLUMNS_TYPE = "columns"

_COUNT_PATTERN = re.compile(r"[0-9]+")


class DocumentNode(Protocol):
    """The part of xml.etree.ElementTree.Element the reader needs."""
    tag: str
    text: Optional[str]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]: ...

    def find(self, path: str) -> Optional[DocumentNode]: ...

    def findall(self, path: str) -> Iterable[DocumentNode]: ...


def parse_puzzle(text: Union[str, bytes]) -> Puzzle:
    """
    Parse an XML puzzle description.

    Bytes are decoded by the XML parser itself, following the encoding
    declared in the document (UTF-8 when there is none).

    Raises:
        StructureError: The text is not well-formed XML (undecodable bytes
            included), or the puzzle root or one of the clue blocks is missing.
        ClueValueError: A count is not a non-negative integer.
    """
    try:
        root = ET.fromstring(text)
    except (ET.ParseError, UnicodeError, LookupError) as e:
        logger.error(f"Puzzle description is not well-formed XML: {e}")
        raise StructureError(f"Puzzle description is not well-formed XML: {e}") from e
    return parse_puzzle_document(root)


def parse_puzzle_file(path: Union[str, Path]) -> Puzzle:
    """Read and parse a puzzle description file in its declared encoding."""
    path = Path(path)
    logger.info(f"Loading puzzle from: {path}")
    return parse_puzzle(path.read_bytes())


def parse_puzzle_document(root: DocumentNode) -> Puzzle:
    """Build a Puzzle from an already parsed document tree."""
    puzzle_node = _find_puzzle_root(root)
    row_clues = _parse_clue_block(_find_clue_block(puzzle_node, ROWS_TYPE))
    column_clues = _parse_clue_block(_find_clue_block(puzzle_node, COLUMNS_TYPE))

    puzzle = Puzzle(row_clues, column_clues)
    logger.info(f"Parsed {puzzle.rows}x{puzzle.columns} puzzle.")
    return puzzle


def _find_puzzle_root(root: DocumentNode) -> DocumentNode:
    if root.tag == PUZZLE_TAG:
        return root
    node = root.find(f".//{PUZZLE_TAG}")
    if node is None:
        logger.error("No puzzle found in description.")
        raise StructureError("No puzzle found")
    return node


def _find_clue_block(puzzle_node: DocumentNode, block_type: str) -> DocumentNode:
    blocks = [node for node in puzzle_node.findall(f".//{CLUES_TAG}") if node.get("type") == block_type]
    if not blocks:
        logger.error(f"No {block_type} clues found in puzzle.")
        raise StructureError(f"No {block_type} clues found")
    if len(blocks) > 1:
        logger.error(f"Found {len(blocks)} {block_type} clue blocks, expected one.")
        raise StructureError(f"Expected exactly one {block_type} clue block, found {len(blocks)}")
    return blocks[0]


def _parse_clue_block(block: DocumentNode) -> list[ClueLine]:
    lines = []
    for line_node in block.findall(f".//{LINE_TAG}"):
        lines.append(tuple(_parse_count(count) for count in line_node.findall(f".//{COUNT_TAG}")))
    return lines


def _parse_count(node: DocumentNode) -> Clue:
    raw = (node.text or "").strip()
    if not _COUNT_PATTERN.fullmatch(raw):
        logger.error(f"Invalid clue count: {raw!r}")
        raise ClueValueError(f"Clue count must be a non-negative integer, got {raw!r}")
    return Clue(count=int(raw), color=node.get("color", DEFAULT_CLUE_COLOR))
