import pytest

from yuletide.day22 import (
    best_banana_total,
    main,
    mix,
    next_secret,
    parse_secrets,
    price,
    prune,
    secret_after,
    sum_secrets,
)


def test_mix_numbers():
    assert mix(42, 15) == 37


def test_prune_numbers():
    assert prune(100000000) == 16113920


def test_sum_secrets_matches_source_cases():
    assert sum_secrets([12]) == 4915986
    assert sum_secrets([17]) == 15322365


def test_secret_to_price():
    assert price(12342) == 2
    assert price(9) == 9


def test_next_secret_sequence_from_123():
    expected = [
        15887950,
        16495136,
        527345,
        704524,
        1553684,
        12683156,
        11100544,
        12249484,
        7753432,
        5908254,
    ]
    secret = 123
    produced = []
    for _ in expected:
        secret = next_secret(secret)
        produced.append(secret)
    assert produced == expected


def test_secret_after_ten_steps():
    assert secret_after(123, 10) == 5908254


def test_secret_after_zero_steps_is_identity():
    assert secret_after(123, 0) == 123


def test_secret_after_negative_steps_raises():
    with pytest.raises(ValueError):
        secret_after(123, -1)


def test_sum_secrets_worked_example():
    assert sum_secrets([1, 10, 100, 2024]) == 37327623


def test_sum_secrets_is_sum_of_individual_results():
    assert sum_secrets([12, 17]) == sum_secrets([12]) + sum_secrets([17])


def test_best_banana_total_worked_example():
    assert best_banana_total([1, 2, 3, 2024]) == 23


def test_best_banana_total_single_buyer_within_digit_range():
    assert 0 <= best_banana_total([1]) <= 9


def test_best_banana_total_no_buyers():
    assert best_banana_total([]) == 0


def test_parse_secrets_skips_blank_lines():
    assert parse_secrets("1\n10\n\n100\n2024\n") == [1, 10, 100, 2024]


def test_parse_secrets_rejects_garbage():
    with pytest.raises(ValueError):
        parse_secrets("12\nabc\n")


def test_main_part_one(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("1\n10\n100\n2024\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "37327623"


def test_main_part_two(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("1\n2\n3\n2024\n")
    assert main([str(path), "--part", "2"]) == 0
    assert capsys.readouterr().out.strip() == "23"