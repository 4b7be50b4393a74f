from __future__ import annotations

import pytest

from dotenvk.core.editor import list_keys, set_pairs, set_value, to_mapping, unset_keys
from dotenvk.core.errors import MalformedPairError
from dotenvk.parsers import Comment, Empty, KeyValue


def test_set_appends_new_key():
    lines = [KeyValue("EXISTING", "value")]
    set_pairs(lines, ["NEW_KEY=new_value"])
    assert lines == [KeyValue("EXISTING", "value"), KeyValue("NEW_KEY", "new_value")]


def test_set_updates_in_place():
    lines = [Comment("# c"), KeyValue("K", "1"), Empty(""), KeyValue("OTHER", "x")]
    set_pairs(lines, ["K=2"])
    assert lines == [Comment("# c"), KeyValue("K", "2"), Empty(""), KeyValue("OTHER", "x")]


def test_set_updates_first_duplicate_only():
    lines = [KeyValue("K", "a"), KeyValue("K", "b")]
    set_pairs(lines, ["K=new"])
    assert lines == [KeyValue("K", "new"), KeyValue("K", "b")]


def test_set_splits_at_first_equals_and_trims_key():
    lines = []
    set_pairs(lines, [" URL =https://x.test/?a=b", "EMPTY="])
    assert lines == [KeyValue("URL", "https://x.test/?a=b"), KeyValue("EMPTY", "")]


def test_set_later_pair_wins_within_call():
    lines = []
    set_pairs(lines, ["A=1", "A=2"])
    assert lines == [KeyValue("A", "2")]


def test_set_malformed_pair_leaves_lines_untouched():
    lines = [KeyValue("K", "v")]
    with pytest.raises(MalformedPairError) as exc:
        set_pairs(lines, ["bad_pair"])
    assert exc.value.pair == "bad_pair"
    assert "Invalid key=value pair: bad_pair" in str(exc.value)
    assert lines == [KeyValue("K", "v")]


def test_set_malformed_pair_keeps_earlier_pairs():
    lines = []
    with pytest.raises(MalformedPairError):
        set_pairs(lines, ["A=1", "broken", "B=2"])
    assert lines == [KeyValue("A", "1")]


def test_set_value_primitive():
    lines = [Comment("# c")]
    set_value(lines, "K", "v")
    set_value(lines, "K", "w")
    assert lines == [Comment("# c"), KeyValue("K", "w")]


def test_unset_removes_all_matches_only():
    lines = [
        KeyValue("KEY1", "value1"),
        Comment("# Comment"),
        KeyValue("KEY2", "value2"),
        KeyValue("KEY3", "value3"),
        Empty(""),
        KeyValue("KEY1", "again"),
    ]
    unset_keys(lines, ["KEY1", "KEY3", "MISSING"])
    assert lines == [Comment("# Comment"), KeyValue("KEY2", "value2"), Empty("")]


def test_unset_keeps_comments_mentioning_key():
    lines = [Comment("# K=old"), KeyValue("K", "1")]
    unset_keys(lines, ["K"])
    assert lines == [Comment("# K=old")]


def test_to_mapping_last_write_wins():
    lines = [KeyValue("A", "1"), Comment("# c"), KeyValue("B", "2"), KeyValue("A", "3")]
    assert to_mapping(lines) == {"A": "3", "B": "2"}


def test_list_keys_in_order_with_duplicates():
    lines = [KeyValue("KEY1", "v"), Comment("# Comment"), KeyValue("KEY2", "v"), KeyValue("KEY1", "w")]
    assert list_keys(lines) == ["KEY1", "KEY2", "KEY1"]
