import pytest

from yuletide.day19 import (
    count_arrangements,
    count_constructible,
    main,
    parse_towels,
)

EXAMPLE = """r, wr, b, g, bwu, rb, gb, br

brwrr
bggr
gbbr
rrbgbr
ubwu
bwurrg
brgr
bbrgwb
"""

PATTERNS = ["r", "wr", "b", "g", "bwu", "rb", "gb", "br"]
DESIGNS = ["brwrr", "bggr", "gbbr", "rrbgbr", "ubwu", "bwurrg", "brgr", "bbrgwb"]


def test_parse_towels_reads_patterns_and_designs():
    designs, patterns = parse_towels(EXAMPLE)
    assert patterns == PATTERNS
    assert designs == DESIGNS


def test_parse_towels_rejects_empty_input():
    with pytest.raises(ValueError):
        parse_towels("")


def test_count_constructible_example():
    assert count_constructible(DESIGNS, PATTERNS) == 6


def test_count_arrangements_example():
    assert count_arrangements(DESIGNS, PATTERNS) == 16


def test_single_design_arrangements():
    assert count_arrangements(["brwrr"], PATTERNS) == 2


def test_constructible_matches_designs_with_arrangements():
    expected = sum(1 for design in DESIGNS if count_arrangements([design], PATTERNS) > 0)
    assert count_constructible(DESIGNS, PATTERNS) == expected


def test_constructible_never_exceeds_arrangements():
    assert count_constructible(DESIGNS, PATTERNS) <= count_arrangements(DESIGNS, PATTERNS)


def test_impossible_design_has_no_arrangement():
    assert count_arrangements(["ubwu"], PATTERNS) == count_constructible(["ubwu"], PATTERNS)
    assert not count_constructible(["ubwu"], PATTERNS)


def test_arrangements_sum_over_designs():
    total = sum(count_arrangements([design], PATTERNS) for design in DESIGNS)
    assert count_arrangements(DESIGNS, PATTERNS) == total


def test_empty_pattern_is_rejected():
    with pytest.raises(ValueError):
        count_arrangements(["abc"], ["a", ""])


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    assert main([str(path), "--part", "1"]) == 0
    assert capsys.readouterr().out.strip() == str(count_constructible(DESIGNS, PATTERNS))
    assert main([str(path), "--part", "2"]) == 0
    assert capsys.readouterr().out.strip() == str(count_arrangements(DESIGNS, PATTERNS))