"""Source Parsing Layer — line splitting and tree-sitter access."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class SourceLine:
    """A trimmed, non-empty line of the snippet and its 1-based line number."""

    number: int
    text: str

    @property
    def is_comment(self) -> bool:
        return self.text.startswith(constants.COMMENT_PREFIXES)


def split_source_lines(source: str) -> list[SourceLine]:
    """Split *source* into trimmed, non-empty lines, keeping line numbers."""
    return [
        SourceLine(number=i + 1, text=raw.strip())
        for i, raw in enumerate(source.split("\n"))
        if raw.strip()
    ]


class ParserFactory(ABC):
    """Abstract factory for obtaining a language parser."""

    @abstractmethod
    def get_parser(self, language: str): ...


class TreeSitterParserFactory(ParserFactory):
    """Concrete factory that delegates to tree-sitter-language-pack."""

    def get_parser(self, language: str):
        import tree_sitter_language_pack as tslp

        return tslp.get_parser(language)


class Parser:
    """Thin wrapper around a parser factory."""

    def __init__(self, parser_factory: ParserFactory):
        self._factory = parser_factory

    def parse(self, source: str, language: str = constants.TREE_SITTER_LANGUAGE):
        parser = self._factory.get_parser(language)
        tree = parser.parse(source.encode("utf-8"))
        return tree
