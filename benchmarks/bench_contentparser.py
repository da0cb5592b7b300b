"""Benchmarks for cmapcontent tokenizing and parsing."""

from typing import Any

import pytest

from cmapcontent.contentparser import CMapContentParser
from cmapcontent.tokenizer import CMapTokenizer


def make_bfchar(count: int) -> bytes:
    lines = [b"%d beginbfchar" % count]
    lines.extend(b"<%04X> <%04X>" % (i, 0x4E00 + i) for i in range(count))
    lines.append(b"endbfchar")
    return b"\r\n".join(lines)


class TestTokenizerBenchmarks:
    def test_next_token(self, benchmark: Any, tounicode_cmap: bytes) -> None:
        """Benchmark next_token() over a whole CMap."""

        def tokenize() -> int:
            tokenizer = CMapTokenizer(tounicode_cmap)
            n = 0
            while tokenizer.next_token():
                n += 1
            return n

        assert benchmark(tokenize) > 0


class TestContentParserBenchmarks:
    @pytest.fixture
    def bfchar_data(self) -> bytes:
        """A bfchar section of 5000 mappings."""
        return make_bfchar(5000)

    def test_parse_commands(self, benchmark: Any, tounicode_cmap: bytes) -> None:
        def parse_all() -> list[Any]:
            return list(CMapContentParser.from_bytes(tounicode_cmap))

        assert len(benchmark(parse_all)) == 21

    def test_parse_large_bfchar(self, benchmark: Any, bfchar_data: bytes) -> None:
        """Benchmark a single command with many hex string operands."""

        def parse_all() -> list[Any]:
            return list(CMapContentParser.from_bytes(bfchar_data))

        result = benchmark(parse_all)
        assert len(result) == 2
        assert len(result[1]) == 10001
