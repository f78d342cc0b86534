import pytest

from leafstack.game import GameResult, Pair, format_result, load_pairs, main, play
from leafstack.letters import to_ascii
from leafstack.stack import Stack


def _drain(stack):
    items = []
    while not stack.empty():
        items.append(stack.pop())
    return items


def test_load_pairs_numbers_and_indices():
    pairs = load_pairs(["5 3 8", "10 20"], 2)
    assert [pair.index for pair in pairs] == [1, 2]
    assert sorted(pairs[0].tree.postorder()) == [3, 5, 8]
    assert sorted(pairs[1].tree.postorder()) == [10, 20]


def test_load_pairs_pads_missing_lines_with_empty_pairs():
    pairs = load_pairs(["4 2"], 4)
    assert len(pairs) == 4
    assert [pair.index for pair in pairs] == [1, 2, 3, 4]
    assert all(pair.tree.empty() and pair.stack.empty() for pair in pairs[1:])


def test_load_pairs_ignores_lines_past_count():
    pairs = load_pairs(["1", "2", "3"], 2)
    assert len(pairs) == 2
    assert list(pairs[1].tree.postorder()) == [2]


def test_load_pairs_stops_at_first_non_integer():
    pairs = load_pairs(["4 7 x 9", "6 12abc 30"], 2)
    assert sorted(pairs[0].tree.postorder()) == [4, 7]
    assert sorted(pairs[1].tree.postorder()) == [6, 12]


def test_load_pairs_drops_duplicates():
    pairs = load_pairs(["3 3 3 1"], 1)
    assert len(pairs[0].tree) == 2


def test_load_pairs_stack_holds_tree_leaves():
    pairs = load_pairs(["50 20 80 10 30 70 90 5"], 1)
    expected = Stack()
    pairs[0].tree.insert_leaves_to(expected)
    assert _drain(pairs[0].stack) == _drain(expected)


def test_pair_letter_maps_tree_sum():
    pair = load_pairs(["1 2 3 4 5 6 7"], 1)[0]
    assert pair.letter == chr(to_ascii(pair.tree.sum()))
    assert "A" <= pair.letter <= "Z"


def test_play_single_pair_wins():
    pairs = load_pairs(["1 2 3"], 1)
    expected_letter = pairs[0].letter
    frames = []
    result = play(pairs, frames.append)
    assert result == GameResult(letter=expected_letter, index=1)
    assert frames == [""]


def test_play_two_pairs_last_one_wins():
    frames = []
    result = play(load_pairs(["1", "2"], 2), frames.append)
    assert result.index == 2
    assert frames[-1] == ""
    assert [len(frame) for frame in frames] == [1, 0]


def test_play_frames_shrink_one_pair_at_a_time():
    pairs = load_pairs(["9 4 12 1", "7 3 15", "2 8", "11"], 6)
    frames = []
    play(pairs, frames.append)
    lengths = [len(frame) for frame in frames]
    assert lengths == list(range(len(pairs) - 1, len(pairs) - 1 - len(frames), -1))
    assert all(set(frame) <= set("ABCDEFGHIJKLMNOPQRSTUVWXYZ") for frame in frames)


def test_play_with_trailing_empty_pairs():
    frames = []
    result = play(load_pairs(["1 2 3"], 3), frames.append)
    assert result.index == 1
    assert [len(frame) for frame in frames] == [2, 1, 0]


def test_play_without_callback_returns_result():
    result = play(load_pairs(["1 2 3"], 1))
    assert result.index == 1


def test_play_all_empty_raises():
    with pytest.raises(ValueError):
        play(load_pairs([], 3))


def test_play_empty_list_raises():
    with pytest.raises(ValueError):
        play([])


def test_play_accepts_hand_built_pairs():
    pair = Pair(index=7)
    pair.tree.insert(4)
    pair.tree.insert_leaves_to(pair.stack)
    result = play([pair])
    assert result.index == 7
    assert result.letter == pair.letter


def test_format_result_layout():
    text = format_result(GameResult(letter="C", index=123))
    lines = text.splitlines()
    assert text.endswith("\n")
    assert lines[0] == "=" * 25
    assert lines[-1] == "=" * 25
    assert lines[1] == "|" + " " * 23 + "|"
    assert lines[2] == "|  Son karakter: C      |"
    assert lines[3] == "|  AVL No      : 123    |"
    assert all(len(line) == 25 for line in lines)


def test_main_prints_result(tmp_path, capsys):
    data = tmp_path / "veri.txt"
    data.write_text("1 2 3\n", encoding="utf-8")
    expected_letter = load_pairs(["1 2 3"], 1)[0].letter
    assert main([str(data), "--lines", "1"]) == 0
    out = capsys.readouterr().out
    assert f"|  Son karakter: {expected_letter}      |" in out
    assert "|  AVL No      : 1    |" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert capsys.readouterr().err == "File could not be opened.\n"


def test_main_empty_data_reports_error(tmp_path, capsys):
    data = tmp_path / "veri.txt"
    data.write_text("", encoding="utf-8")
    assert main([str(data), "--lines", "2"]) == 1
    assert "non-empty tree" in capsys.readouterr().err